"""Identity Number Service — shell around parse_identity_number.

Invariants:
    - "today" is read from the injected Clock once per parse call
    - Rejections are logged at DEBUG with error_code only (never the number)
    - validate_many preserves input order and length

Design Decisions:
    - Result-returning parse() plus raising parse_or_raise(): routes raise so the
      global IdCardError handler builds the envelope, batch code keeps values
    - from_settings() builds production wiring; tests construct directly with fakes
"""

import logging
from collections.abc import Iterable

from idcard.config import Settings
from idcard.core.boundary_protocols import Clock, DivisionRegistry
from idcard.core.domain_types import Division
from idcard.core.errors import InvalidIdentityNumberError, ResourceNotFoundError
from idcard.core.fields import BIRTH_FLOOR_YEAR
from idcard.core.identity_number import IdentityNumber, parse_identity_number
from idcard.core.invalid_id import InvalidId
from idcard.infrastructure.clock import SystemClock
from idcard.infrastructure.division_registry import load_division_registry

logger = logging.getLogger(__name__)


class IdentityNumberService:
    """Parses identity numbers against one registry, clock and floor year."""

    def __init__(
        self,
        registry: DivisionRegistry,
        clock: Clock,
        floor_year: int = BIRTH_FLOOR_YEAR,
    ):
        self.registry = registry
        self.clock = clock
        self.floor_year = floor_year

    @classmethod
    def from_settings(cls, settings: Settings) -> "IdentityNumberService":
        return cls(
            registry=load_division_registry(settings.division_data_path),
            clock=SystemClock(settings.utc_offset_hours),
            floor_year=settings.birth_floor_year,
        )

    def parse(self, number: str) -> IdentityNumber | InvalidId:
        result = parse_identity_number(
            number,
            registry=self.registry,
            today=self.clock.today(),
            floor_year=self.floor_year,
        )
        if not isinstance(result, IdentityNumber):
            logger.debug(
                "Identity number rejected",
                extra={"error_code": result.kind.value},
            )
        return result

    def parse_or_raise(self, number: str) -> IdentityNumber:
        result = self.parse(number)
        if not isinstance(result, IdentityNumber):
            raise InvalidIdentityNumberError(result)
        return result

    def is_valid(self, number: str) -> bool:
        return isinstance(self.parse(number), IdentityNumber)

    def validate_many(
        self, numbers: Iterable[str],
    ) -> list[IdentityNumber | InvalidId]:
        """Parse every number; one result per input, same order."""
        results = [self.parse(n) for n in numbers]
        rejected = sum(1 for r in results if not isinstance(r, IdentityNumber))
        logger.info(
            f"Validated batch: {len(results) - rejected} valid, {rejected} rejected",
            extra={"batch_size": len(results)},
        )
        return results

    def lookup_division(self, code: str) -> Division:
        division = self.registry.get(code)
        if division is None:
            raise ResourceNotFoundError("Division", code)
        return division
