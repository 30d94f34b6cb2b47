"""Division Routes — GB/T 2260 region lookup by 6-digit code."""

from fastapi import APIRouter, Depends

from idcard.api.dependencies import get_identity_service
from idcard.schemas.identity import DivisionResponse
from idcard.services.identity_service import IdentityNumberService

router = APIRouter(prefix="/api/v1/divisions", tags=["divisions"])


@router.get("/{code}", response_model=DivisionResponse)
def get_division(
    code: str,
    service: IdentityNumberService = Depends(get_identity_service),
):
    return DivisionResponse.from_domain(service.lookup_division(code))
