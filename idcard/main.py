"""idcard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map IdCardError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Division registry loaded on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py; main.py only wires
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from idcard.api.error_handlers import register_error_handlers
from idcard.api.routes import divisions, health, identity_numbers
from idcard.config import get_settings
from idcard.infrastructure.observability import setup_logging
from idcard.services.identity_service import IdentityNumberService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.identity_service = IdentityNumberService.from_settings(settings)
    logger.info("idcard API started")
    yield
    app.state.identity_service = None
    logger.info("idcard API shutting down")


app = FastAPI(title="idcard API", version="0.1.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(identity_numbers.router)
app.include_router(divisions.router)

register_error_handlers(app)
