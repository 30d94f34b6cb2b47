"""Field Tokenizer — fixed-offset slicing of an 18-character identity number.

Invariants:
    - Length is counted in code points (len(str)), never in encoded bytes
    - Wrong length short-circuits: no field is sliced or inspected
    - Offsets 6, 14, 17 produce fields of length 6, 8, 3, 1
"""

from typing import NamedTuple

from idcard.core.invalid_id import LengthMismatch

IDNUMBER_LENGTH: int = 18
DIV_CODE_LENGTH: int = 6
BIRTHDAY_LENGTH: int = 8
SEQ_LENGTH: int = 3

_BIRTHDAY_START = DIV_CODE_LENGTH
_SEQ_START = _BIRTHDAY_START + BIRTHDAY_LENGTH
_CHECK_START = _SEQ_START + SEQ_LENGTH


class RawFields(NamedTuple):
    """The four positional sub-strings of a length-checked number."""
    div_code: str
    birthday: str
    seq: str
    check_code: str

    @property
    def body(self) -> str:
        """First 17 characters, the input of the checksum engine."""
        return self.div_code + self.birthday + self.seq


def split_fields(s: str) -> RawFields | LengthMismatch:
    """Slice s into its four fields, or report the observed length."""
    length = len(s)
    if length != IDNUMBER_LENGTH:
        return LengthMismatch(length)
    return RawFields(
        div_code=s[:_BIRTHDAY_START],
        birthday=s[_BIRTHDAY_START:_SEQ_START],
        seq=s[_SEQ_START:_CHECK_START],
        check_code=s[_CHECK_START:],
    )
