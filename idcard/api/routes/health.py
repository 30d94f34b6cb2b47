"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 until the division registry is loaded (readiness)
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "idcard-api",
        "version": "0.1.0",
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe — includes division registry availability."""
    service = getattr(request.app.state, "identity_service", None)
    if service is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "division_registry_unavailable",
            },
        )
    return {
        "status": "ready",
        "checks": {"division_registry": len(service.registry)},
    }
