"""API test fixtures — FastAPI app with a deterministic service on app.state.

Invariants:
    - Every test gets a service pinned to the shared TODAY and bundled registry
    - app.state is restored after each test

Design Decisions:
    - ASGITransport does not run lifespan: fixtures populate app.state directly
"""

import pytest
from httpx import ASGITransport, AsyncClient

from idcard.main import app
from idcard.services.identity_service import IdentityNumberService


@pytest.fixture
def service(registry, clock):
    return IdentityNumberService(registry, clock)


@pytest.fixture
async def client(service):
    """Test client with the identity service installed on app.state."""
    original = getattr(app.state, "identity_service", None)
    app.state.identity_service = service
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.state.identity_service = original


@pytest.fixture
async def bare_client():
    """Test client with no service loaded (startup not run)."""
    original = getattr(app.state, "identity_service", None)
    app.state.identity_service = None
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.state.identity_service = original
