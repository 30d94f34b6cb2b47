"""Clocks — "today" providers for birthday upper-bound checks.

Invariants:
    - SystemClock.today() is the calendar date at a fixed UTC offset
    - FixedClock.today() never changes (deterministic tests)

Design Decisions:
    - Fixed UTC offset over IANA zone names: no tzdata dependency, China has no DST
"""

from datetime import date, datetime, timedelta, timezone


class SystemClock:
    """Wall-clock date at utc_offset_hours (default China Standard Time)."""

    def __init__(self, utc_offset_hours: int = 8):
        self._tz = timezone(timedelta(hours=utc_offset_hours))

    def today(self) -> date:
        return datetime.now(self._tz).date()


class FixedClock:
    """Clock pinned to a single day."""

    def __init__(self, day: date):
        self._day = day

    def today(self) -> date:
        return self._day
