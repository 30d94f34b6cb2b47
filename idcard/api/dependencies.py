"""Route Dependencies — FastAPI providers for shell services.

Invariants:
    - The service instance is created once in lifespan and stored on app.state
    - Missing service (startup failed or not run) surfaces as DivisionDataError (503)

Design Decisions:
    - Dependency function over module global: tests swap it via dependency_overrides
"""

from fastapi import Request

from idcard.core.errors import DivisionDataError
from idcard.services.identity_service import IdentityNumberService


def get_identity_service(request: Request) -> IdentityNumberService:
    service = getattr(request.app.state, "identity_service", None)
    if service is None:
        raise DivisionDataError("registry not loaded", "app.state")
    return service
