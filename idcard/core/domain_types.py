"""Domain Types — small value types shared by core and shell.

Invariants:
    - Division is a frozen value: the core copies it, never mutates registry data
    - Division.code is always 6 ASCII digits when produced by a registry
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - Frozen dataclass over NewType for Division: carries the name with the code
      so API responses need no second lookup
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

DivisionCode = NewType("DivisionCode", str)     # 6 ASCII digits, GB/T 2260
BirthSeq = NewType("BirthSeq", int)             # 0–999


@dataclass(frozen=True)
class Division:
    """Administrative division handle as returned by a DivisionRegistry."""
    code: DivisionCode
    name: str

    @property
    def province_code(self) -> str:
        """Province-level code: first two digits padded with zeros."""
        return self.code[:2] + "0000"

    @property
    def prefecture_code(self) -> str:
        """Prefecture-level code: first four digits padded with zeros."""
        return self.code[:4] + "00"


# ─── Enums ───────────────────────────────────────────────────────

class Sex(str, Enum):
    """Sex encoded by sequence parity: odd = male, even = female."""
    MALE = "male"
    FEMALE = "female"
