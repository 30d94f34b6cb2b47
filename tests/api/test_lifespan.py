"""Application Lifespan — startup loads the service, shutdown clears it."""

import logging

from idcard.main import app, lifespan


async def test_lifespan_installs_and_clears_service():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    original = getattr(app.state, "identity_service", None)
    try:
        async with lifespan(app):
            service = app.state.identity_service
            assert service is not None
            assert service.registry.get("510108").name == "成华区"
        assert app.state.identity_service is None
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
        app.state.identity_service = original
