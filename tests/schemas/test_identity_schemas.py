"""Identity Number Schemas — tests for request validation and domain mapping.

Tests cover:
    - ParseRequest keeps the number verbatim and caps its length
    - BatchValidateRequest enforces 1-1000 items and caps each number
    - IdentityNumberResponse / ValidationResult built from domain values
"""

from datetime import date

import pytest
from pydantic import ValidationError

from idcard.core.identity_number import parse_identity_number
from idcard.core.invalid_id import InvalidIdKind, LengthMismatch, WrongCheckCode
from idcard.schemas.identity import (
    BatchValidateRequest,
    IdentityNumberResponse,
    InvalidIdResponse,
    ParseRequest,
    ValidationResult,
)


def test_parse_request_keeps_whitespace():
    assert ParseRequest(number=" 510108197205052137 ").number == " 510108197205052137 "


def test_parse_request_length_cap():
    with pytest.raises(ValidationError):
        ParseRequest(number="1" * 257)


def test_batch_request_rejects_empty():
    with pytest.raises(ValidationError):
        BatchValidateRequest(numbers=[])


def test_batch_request_rejects_too_many():
    with pytest.raises(ValidationError):
        BatchValidateRequest(numbers=["1"] * 1001)


def test_batch_request_caps_each_number():
    with pytest.raises(ValidationError) as exc:
        BatchValidateRequest(numbers=["510108197205052137", "1" * 257])
    assert exc.value.errors()[0]["loc"] == ("numbers", 1)


def test_batch_request_accepts_number_at_cap():
    request = BatchValidateRequest(numbers=["1" * 256])
    assert request.numbers == ["1" * 256]


def test_identity_number_response_from_domain(registry, today):
    id_number = parse_identity_number("510108197205052137", registry=registry, today=today)
    resp = IdentityNumberResponse.from_domain(id_number)
    assert resp.number == "510108197205052137"
    assert resp.division.code == "510108"
    assert resp.division.province_code == "510000"
    assert resp.birth == date(1972, 5, 5)
    assert resp.seq == 213
    assert resp.model_dump(mode="json")["sex"] == "male"


def test_invalid_id_response_keeps_int_payload():
    resp = InvalidIdResponse.from_domain(LengthMismatch(17))
    assert resp.kind == InvalidIdKind.LENGTH_MISMATCH
    assert resp.payload == 17


def test_invalid_id_response_keeps_digit_string_payload():
    resp = InvalidIdResponse.from_domain(WrongCheckCode("7"))
    assert resp.payload == "7"


def test_validation_result_valid(registry, today):
    result = parse_identity_number("41042119810616502X", registry=registry, today=today)
    vr = ValidationResult.from_result("41042119810616502X", result)
    assert vr.valid is True
    assert vr.error is None


def test_validation_result_invalid():
    vr = ValidationResult.from_result("51010819720505213X", WrongCheckCode("X"))
    assert vr.valid is False
    assert vr.error.kind == InvalidIdKind.WRONG_CHECK_CODE
    assert vr.model_dump(mode="json")["error"]["kind"] == "wrong_check_code"
