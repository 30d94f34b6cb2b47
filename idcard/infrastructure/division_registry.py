"""Division Registry — GB/T 2260 administrative division lookup from JSON data.

Invariants:
    - Registry is read-only after construction (safe to share across threads)
    - Every stored code is exactly 6 ASCII digits with a non-empty name
    - Historical (abolished) codes stay valid: old identity numbers keep them
    - Any unreadable or malformed file raises DivisionDataError, never a partial registry

Design Decisions:
    - JSON object {code: name}: one flat file, easy to replace with a full dataset
    - load_division_registry cached per path: one parse per process
"""

import json
import logging
import re
from collections.abc import Mapping
from functools import lru_cache
from importlib import resources
from types import MappingProxyType

from idcard.core.domain_types import Division, DivisionCode
from idcard.core.errors import DivisionDataError

logger = logging.getLogger(__name__)

BUNDLED_SOURCE = "bundled:divisions.json"

_CODE_RE = re.compile(r"[0-9]{6}")


class InMemoryDivisionRegistry:
    """Dict-backed DivisionRegistry."""

    def __init__(self, divisions: Mapping[str, str]):
        self._divisions = MappingProxyType(dict(divisions))

    def get(self, code: str) -> Division | None:
        name = self._divisions.get(code)
        if name is None:
            return None
        return Division(code=DivisionCode(code), name=name)

    def __contains__(self, code: object) -> bool:
        return code in self._divisions

    def __len__(self) -> int:
        return len(self._divisions)


def parse_division_data(raw: object, source: str) -> dict[str, str]:
    """Validate decoded JSON and return the code -> name mapping."""
    if not isinstance(raw, dict):
        raise DivisionDataError("top-level value must be an object", source)
    divisions: dict[str, str] = {}
    for code, name in raw.items():
        if not _CODE_RE.fullmatch(code):
            raise DivisionDataError(f"invalid division code {code!r}", source)
        if not isinstance(name, str) or not name.strip():
            raise DivisionDataError(f"empty name for division {code}", source)
        divisions[code] = name.strip()
    return divisions


def _read_text(path: str | None) -> tuple[str, str]:
    if path is None:
        data = resources.files("idcard.data").joinpath("divisions.json")
        return data.read_text(encoding="utf-8"), BUNDLED_SOURCE
    with open(path, encoding="utf-8") as f:
        return f.read(), path


@lru_cache
def load_division_registry(path: str | None = None) -> InMemoryDivisionRegistry:
    """Load a registry from path, or from the bundled sample when path is None."""
    source = BUNDLED_SOURCE if path is None else path
    try:
        text, source = _read_text(path)
        raw = json.loads(text)
    except OSError as e:
        raise DivisionDataError(str(e), source) from e
    except json.JSONDecodeError as e:
        raise DivisionDataError(f"invalid JSON: {e}", source) from e

    registry = InMemoryDivisionRegistry(parse_division_data(raw, source))
    logger.info(
        "Division registry loaded",
        extra={"source": source, "division_count": len(registry)},
    )
    return registry
