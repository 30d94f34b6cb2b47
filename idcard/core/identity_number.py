"""Identity Number Assembler — parse an 18-character string into IdentityNumber.

Invariants:
    - Validation order is fixed: length, division, birthday, seq, check char, checksum
    - First failure wins; exactly one outcome per input
    - IdentityNumber is only constructed here, after every check passed
    - The check code is never stored; it is recomputed from the fields
    - Input is taken verbatim (no strip, no upper-casing)

Design Decisions:
    - Private construction key passed as an InitVar and checked in __post_init__:
      direct instantiation and dataclasses.replace() both fail, and the key is
      never stored on the instance
    - Returns the InvalidId value instead of raising (shell decides how to surface)
"""

from dataclasses import InitVar, dataclass
from datetime import date

from idcard.core.boundary_protocols import DivisionRegistry
from idcard.core.checksum import compute_check_code
from idcard.core.domain_types import BirthSeq, Division, Sex
from idcard.core.fields import (
    BIRTH_FLOOR_YEAR,
    resolve_division,
    validate_birthday,
    validate_check_code,
    validate_seq,
)
from idcard.core.invalid_id import (
    DivisionNotFound,
    InvalidBirthday,
    InvalidCheckCode,
    InvalidId,
    InvalidSeq,
    LengthMismatch,
    WrongCheckCode,
)
from idcard.core.tokenize import split_fields

_CONSTRUCTION_KEY = object()


@dataclass(frozen=True)
class IdentityNumber:
    """Second-generation Resident Identity Number: division, birth date, sequence."""

    # GB/T 2260 administrative division at registration
    division: Division

    # Birth date, within [floor year, today] at validation time
    birth: date

    # Same-day birth order, 0–999
    seq: BirthSeq

    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        if _key is not _CONSTRUCTION_KEY:
            raise TypeError(
                "IdentityNumber cannot be built directly; use parse_identity_number()",
            )

    @property
    def sex(self) -> Sex:
        return Sex.MALE if self.seq % 2 else Sex.FEMALE

    @property
    def body(self) -> str:
        """First 17 characters of the canonical number."""
        b = self.birth
        return f"{self.division.code}{b.year:04d}{b.month:02d}{b.day:02d}{self.seq:03d}"

    @property
    def check_code(self) -> str:
        return compute_check_code(self.body)

    def age_on(self, on: date) -> int:
        """Completed years of age at the given date."""
        if on < self.birth:
            raise ValueError(f"{on.isoformat()} is before birth date")
        before_birthday = (on.month, on.day) < (self.birth.month, self.birth.day)
        return on.year - self.birth.year - int(before_birthday)

    def __str__(self) -> str:
        return self.body + self.check_code


def parse_identity_number(
    s: str,
    *,
    registry: DivisionRegistry,
    today: date,
    floor_year: int = BIRTH_FLOOR_YEAR,
) -> IdentityNumber | InvalidId:
    """Validate s and return its IdentityNumber, or the first InvalidId found."""
    fields = split_fields(s)
    if isinstance(fields, LengthMismatch):
        return fields

    division = resolve_division(fields.div_code, registry)
    if isinstance(division, DivisionNotFound):
        return division

    birth = validate_birthday(fields.birthday, today, floor_year)
    if isinstance(birth, InvalidBirthday):
        return birth

    seq = validate_seq(fields.seq)
    if isinstance(seq, InvalidSeq):
        return seq

    check_code = validate_check_code(fields.check_code)
    if isinstance(check_code, InvalidCheckCode):
        return check_code

    if check_code != compute_check_code(fields.body):
        return WrongCheckCode(check_code)

    return IdentityNumber(division, birth, seq, _CONSTRUCTION_KEY)
