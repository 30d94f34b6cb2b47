"""Identity Number Routes — parse one number or validate a batch.

Invariants:
    - POST /parse returns 200 with fields or 422 INVALID_IDENTITY_NUMBER
    - POST /validate always returns 200 with one result per input, in order
"""

from fastapi import APIRouter, Depends

from idcard.api.dependencies import get_identity_service
from idcard.schemas.identity import (
    BatchValidateRequest,
    IdentityNumberResponse,
    ParseRequest,
    ValidationResult,
)
from idcard.services.identity_service import IdentityNumberService

router = APIRouter(prefix="/api/v1/identity-numbers", tags=["identity-numbers"])


@router.post("/parse", response_model=IdentityNumberResponse)
def parse_identity_number(
    body: ParseRequest,
    service: IdentityNumberService = Depends(get_identity_service),
):
    id_number = service.parse_or_raise(body.number)
    return IdentityNumberResponse.from_domain(id_number)


@router.post("/validate", response_model=list[ValidationResult])
def validate_identity_numbers(
    body: BatchValidateRequest,
    service: IdentityNumberService = Depends(get_identity_service),
):
    results = service.validate_many(body.numbers)
    return [
        ValidationResult.from_result(number, result)
        for number, result in zip(body.numbers, results)
    ]
