"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Division data and wall-clock time are reached only through these Protocols
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass plain fakes
    - Sync methods: registry lookups are in-memory; the core stays sync
"""

from datetime import date
from typing import Protocol

from idcard.core.domain_types import Division


class DivisionRegistry(Protocol):
    """Read-only GB/T 2260 lookup — implemented by shell."""
    def get(self, code: str) -> Division | None: ...


class Clock(Protocol):
    """Source of "today" for birthday bounds — implemented by shell."""
    def today(self) -> date: ...
