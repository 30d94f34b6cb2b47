"""Root conftest — shared test configuration and fixtures.

Invariants:
    - Tests never read a real .env division path: the bundled dataset is used
    - "today" is pinned so birthday bounds are deterministic
"""

import os
from datetime import date

import pytest

os.environ.setdefault("DIVISION_DATA_PATH", "")
os.environ.setdefault("LOG_FORMAT", "text")

from idcard.infrastructure.clock import FixedClock  # noqa: E402
from idcard.infrastructure.division_registry import load_division_registry  # noqa: E402

TODAY = date(2024, 6, 1)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def registry():
    return load_division_registry()


@pytest.fixture
def clock(today):
    return FixedClock(today)
