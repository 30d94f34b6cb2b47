"""Invalid Identity Number Taxonomy — closed union of rejection reasons.

Invariants:
    - Exactly six variants; each carries only its minimal diagnostic payload
    - Variants are values, not exceptions: parse returns them, never raises them
    - Every variant exposes kind, payload and message

Design Decisions:
    - Frozen dataclasses + union alias over an exception hierarchy: callers
      branch on the result with isinstance/match, the core never raises
    - kind as ClassVar str Enum: stable machine-readable code for the API
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeAlias


class InvalidIdKind(str, Enum):
    """Machine-readable rejection codes, one per variant."""
    LENGTH_MISMATCH = "length_mismatch"
    DIVISION_NOT_FOUND = "division_not_found"
    INVALID_BIRTHDAY = "invalid_birthday"
    INVALID_SEQ = "invalid_seq"
    INVALID_CHECK_CODE = "invalid_check_code"
    WRONG_CHECK_CODE = "wrong_check_code"


@dataclass(frozen=True)
class LengthMismatch:
    """Input is not 18 code points long."""
    length: int
    kind: ClassVar[InvalidIdKind] = InvalidIdKind.LENGTH_MISMATCH

    @property
    def payload(self) -> int:
        return self.length

    @property
    def message(self) -> str:
        return f"Identity number must be 18 characters, got {self.length}"


@dataclass(frozen=True)
class DivisionNotFound:
    """Division code absent from the GB/T 2260 registry (or not digits at all)."""
    code: str
    kind: ClassVar[InvalidIdKind] = InvalidIdKind.DIVISION_NOT_FOUND

    @property
    def payload(self) -> str:
        return self.code

    @property
    def message(self) -> str:
        return f"Division code {self.code!r} not found"


@dataclass(frozen=True)
class InvalidBirthday:
    """Birth date unparseable, earlier than the floor year, or in the future."""
    birthday: str
    kind: ClassVar[InvalidIdKind] = InvalidIdKind.INVALID_BIRTHDAY

    @property
    def payload(self) -> str:
        return self.birthday

    @property
    def message(self) -> str:
        return f"Invalid birthday {self.birthday!r}"


@dataclass(frozen=True)
class InvalidSeq:
    """Sequence number is not three ASCII digits."""
    seq: str
    kind: ClassVar[InvalidIdKind] = InvalidIdKind.INVALID_SEQ

    @property
    def payload(self) -> str:
        return self.seq

    @property
    def message(self) -> str:
        return f"Invalid sequence number {self.seq!r}"


@dataclass(frozen=True)
class InvalidCheckCode:
    """Check character outside the 0-9/X alphabet (lowercase x included)."""
    check_code: str
    kind: ClassVar[InvalidIdKind] = InvalidIdKind.INVALID_CHECK_CODE

    @property
    def payload(self) -> str:
        return self.check_code

    @property
    def message(self) -> str:
        return f"Invalid check code character {self.check_code!r}"


@dataclass(frozen=True)
class WrongCheckCode:
    """Well-formed check character that does not match the computed one."""
    check_code: str
    kind: ClassVar[InvalidIdKind] = InvalidIdKind.WRONG_CHECK_CODE

    @property
    def payload(self) -> str:
        return self.check_code

    @property
    def message(self) -> str:
        return f"Check code {self.check_code!r} does not match the number"


InvalidId: TypeAlias = (
    LengthMismatch
    | DivisionNotFound
    | InvalidBirthday
    | InvalidSeq
    | InvalidCheckCode
    | WrongCheckCode
)

INVALID_ID_TYPES: tuple[type, ...] = (
    LengthMismatch, DivisionNotFound, InvalidBirthday,
    InvalidSeq, InvalidCheckCode, WrongCheckCode,
)


def is_invalid_id(value: object) -> bool:
    """True if value is one of the six rejection variants."""
    return isinstance(value, INVALID_ID_TYPES)
