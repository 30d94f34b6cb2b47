"""Checksum Engine — weighted modulus-11 check code over the first 17 digits.

Invariants:
    - WEIGHTS has 17 entries, position 0 aligned with the leftmost digit
    - CHECK_CODES is indexed by (weighted sum mod 11)
    - Only uppercase "X" belongs to the alphabet; lowercase "x" never does

Design Decisions:
    - Tuples for the tables: immutable, indexable by position/remainder
    - compute_check_code rejects non-ASCII digits instead of trusting int():
      int() accepts full-width and other Unicode digits
"""

WEIGHTS: tuple[int, ...] = (7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2)
CHECK_CODES: tuple[str, ...] = ("1", "0", "X", "9", "8", "7", "6", "5", "4", "3", "2")
ID_MODULUS: int = 11

_ASCII_DIGITS = frozenset("0123456789")


def compute_check_code(body: str) -> str:
    """Return the expected check character for a 17-digit body.

    Raises ValueError if body is not exactly 17 ASCII digits.
    """
    if len(body) != len(WEIGHTS) or not _ASCII_DIGITS.issuperset(body):
        raise ValueError(f"checksum body must be {len(WEIGHTS)} ASCII digits")
    total = sum(int(digit) * weight for digit, weight in zip(body, WEIGHTS))
    return CHECK_CODES[total % ID_MODULUS]


def is_check_code_char(ch: str) -> bool:
    """Case-sensitive membership test against CHECK_CODES."""
    return ch in CHECK_CODES
