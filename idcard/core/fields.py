"""Field Validators — per-field parse/validate steps of an identity number.

Invariants:
    - Each validator returns either its success value or its own InvalidId variant
    - Only ASCII digits count as digits (str.isdigit() accepts "５" and "٣")
    - Birthday bounds: floor_year-01-01 <= birth <= today, both inclusive
    - "today" is a parameter; nothing here reads the system clock

Design Decisions:
    - parse_date_digits / parse_seq_digits raise ValueError (generic parsers);
      validate_* wrap them and translate failures into typed variants
    - Division codes that are not 6 ASCII digits never reach the registry
"""

import re
from datetime import date

from idcard.core.boundary_protocols import DivisionRegistry
from idcard.core.checksum import is_check_code_char
from idcard.core.domain_types import BirthSeq, Division
from idcard.core.invalid_id import (
    DivisionNotFound, InvalidBirthday, InvalidCheckCode, InvalidSeq,
)

BIRTH_FLOOR_YEAR: int = 1900

_DIV_CODE_RE = re.compile(r"[0-9]{6}")
_DATE_RE = re.compile(r"([0-9]{4})([0-9]{2})([0-9]{2})")
_SEQ_RE = re.compile(r"[0-9]{3}")


# ─── Generic parsers ─────────────────────────────────────────────

def parse_date_digits(s: str) -> date:
    """Parse YYYYMMDD (8 ASCII digits) into a calendar date. No bounds check."""
    m = _DATE_RE.fullmatch(s)
    if m is None:
        raise ValueError(f"expected 8 ASCII digits, got {s!r}")
    year, month, day = (int(g) for g in m.groups())
    # date() raises ValueError for year 0, month 13, Feb 30, ...
    return date(year, month, day)


def parse_seq_digits(s: str) -> BirthSeq:
    """Parse a 3-digit ASCII sequence number into 0–999."""
    if _SEQ_RE.fullmatch(s) is None:
        raise ValueError(f"expected 3 ASCII digits, got {s!r}")
    return BirthSeq(int(s))


# ─── Field validators ────────────────────────────────────────────

def resolve_division(
    code: str, registry: DivisionRegistry,
) -> Division | DivisionNotFound:
    """Look up the 6-character division code in the registry."""
    if _DIV_CODE_RE.fullmatch(code) is None:
        return DivisionNotFound(code)
    division = registry.get(code)
    if division is None:
        return DivisionNotFound(code)
    return division


def validate_birthday(
    raw: str, today: date, floor_year: int = BIRTH_FLOOR_YEAR,
) -> date | InvalidBirthday:
    """Parse the 8-digit birthday and bound it by floor_year and today."""
    try:
        birth = parse_date_digits(raw)
    except ValueError:
        return InvalidBirthday(raw)
    if birth.year < floor_year or birth > today:
        return InvalidBirthday(raw)
    return birth


def validate_seq(raw: str) -> BirthSeq | InvalidSeq:
    try:
        return parse_seq_digits(raw)
    except ValueError:
        return InvalidSeq(raw)


def validate_check_code(ch: str) -> str | InvalidCheckCode:
    if not is_check_code_char(ch):
        return InvalidCheckCode(ch)
    return ch
