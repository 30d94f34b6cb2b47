"""Identity Number Schemas — API contracts for parsing and validation.

Invariants:
    - ParseRequest.number is passed through verbatim (no strip, no upper-casing)
    - BatchValidateRequest holds 1-1000 numbers, each capped like ParseRequest.number
    - ValidationResult.error is None exactly when valid is True

Design Decisions:
    - number capped at 256 chars: long enough to report LengthMismatch for any
      realistic typo, short enough to bound request size
"""

from datetime import date
from typing import Annotated

from pydantic import BaseModel, Field

from idcard.core.domain_types import Division, Sex
from idcard.core.identity_number import IdentityNumber
from idcard.core.invalid_id import InvalidId, InvalidIdKind


class ParseRequest(BaseModel):
    number: str = Field(max_length=256)


class BatchValidateRequest(BaseModel):
    numbers: list[Annotated[str, Field(max_length=256)]] = Field(
        min_length=1, max_length=1000,
    )


class DivisionResponse(BaseModel):
    code: str
    name: str
    province_code: str
    prefecture_code: str

    @classmethod
    def from_domain(cls, division: Division) -> "DivisionResponse":
        return cls(
            code=division.code,
            name=division.name,
            province_code=division.province_code,
            prefecture_code=division.prefecture_code,
        )


class IdentityNumberResponse(BaseModel):
    """Parsed identity number — canonical string plus its fields."""
    number: str
    division: DivisionResponse
    birth: date
    seq: int = Field(ge=0, le=999)
    sex: Sex

    @classmethod
    def from_domain(cls, id_number: IdentityNumber) -> "IdentityNumberResponse":
        return cls(
            number=str(id_number),
            division=DivisionResponse.from_domain(id_number.division),
            birth=id_number.birth,
            seq=id_number.seq,
            sex=id_number.sex,
        )


class InvalidIdResponse(BaseModel):
    kind: InvalidIdKind
    payload: int | str
    message: str

    @classmethod
    def from_domain(cls, invalid: InvalidId) -> "InvalidIdResponse":
        return cls(kind=invalid.kind, payload=invalid.payload, message=invalid.message)


class ValidationResult(BaseModel):
    number: str
    valid: bool
    error: InvalidIdResponse | None = None

    @classmethod
    def from_result(
        cls, number: str, result: IdentityNumber | InvalidId,
    ) -> "ValidationResult":
        if isinstance(result, IdentityNumber):
            return cls(number=number, valid=True)
        return cls(
            number=number, valid=False, error=InvalidIdResponse.from_domain(result),
        )
