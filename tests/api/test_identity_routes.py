"""Identity Number Routes — HTTP tests for parse, validate and division lookup.

Tests cover:
    - POST /parse success body and each rejection as a 422 envelope
    - POST /validate batch results in input order
    - Request validation errors map to 400 VALIDATION_ERROR
    - GET /divisions/{code} found and 404
    - Missing service maps to 503 DIVISION_DATA_ERROR
"""

from datetime import date

import pytest

from idcard.api.dependencies import get_identity_service
from idcard.infrastructure.clock import FixedClock
from idcard.main import app
from idcard.services.identity_service import IdentityNumberService

PARSE_URL = "/api/v1/identity-numbers/parse"
VALIDATE_URL = "/api/v1/identity-numbers/validate"


# ─── POST /parse ─────────────────────────────────────────────────

async def test_parse_valid_number(client):
    resp = await client.post(PARSE_URL, json={"number": "510108197205052137"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["number"] == "510108197205052137"
    assert body["division"] == {
        "code": "510108",
        "name": "成华区",
        "province_code": "510000",
        "prefecture_code": "510100",
    }
    assert body["birth"] == "1972-05-05"
    assert body["seq"] == 213
    assert body["sex"] == "male"


@pytest.mark.parametrize(
    "number, kind, payload",
    [
        ("51010819720505213", "length_mismatch", 17),
        ("000000197205052137", "division_not_found", "000000"),
        ("5101081972?5052137", "invalid_birthday", "1972?505"),
        ("510108187205052137", "invalid_birthday", "18720505"),
        ("5101081972050521$7", "invalid_seq", "21$"),
        ("51010819720505213%", "invalid_check_code", "%"),
        ("51010819720505213x", "invalid_check_code", "x"),
        ("51010819720505213X", "wrong_check_code", "X"),
    ],
)
async def test_parse_rejections(client, number, kind, payload):
    resp = await client.post(PARSE_URL, json={"number": number})
    assert resp.status_code == 422
    error = resp.json()["error"]
    assert error["code"] == "INVALID_IDENTITY_NUMBER"
    assert error["category"] == "validation"
    assert error["details"] == {"kind": kind, "payload": payload}


async def test_parse_missing_field_is_validation_error(client):
    resp = await client.post(PARSE_URL, json={})
    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "body.number"


async def test_parse_uses_overridden_service(client, registry):
    app.dependency_overrides[get_identity_service] = lambda: IdentityNumberService(
        registry, FixedClock(date(1970, 1, 1)),
    )
    try:
        resp = await client.post(PARSE_URL, json={"number": "510108197205052137"})
    finally:
        app.dependency_overrides.clear()
    assert resp.status_code == 422
    assert resp.json()["error"]["details"]["kind"] == "invalid_birthday"


# ─── POST /validate ──────────────────────────────────────────────

async def test_validate_batch(client):
    numbers = ["510108197205052137", "51010819720505213X", "41042119810616502X"]
    resp = await client.post(VALIDATE_URL, json={"numbers": numbers})
    assert resp.status_code == 200
    body = resp.json()
    assert [r["number"] for r in body] == numbers
    assert [r["valid"] for r in body] == [True, False, True]
    assert body[0]["error"] is None
    assert body[1]["error"]["kind"] == "wrong_check_code"
    assert body[1]["error"]["payload"] == "X"


async def test_validate_empty_batch_rejected(client):
    resp = await client.post(VALIDATE_URL, json={"numbers": []})
    assert resp.status_code == 400


# ─── GET /divisions/{code} ───────────────────────────────────────

async def test_get_division(client):
    resp = await client.get("/api/v1/divisions/410421")
    assert resp.status_code == 200
    assert resp.json()["name"] == "宝丰县"
    assert resp.json()["prefecture_code"] == "410400"


async def test_get_division_not_found(client):
    resp = await client.get("/api/v1/divisions/000000")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


# ─── No service loaded ───────────────────────────────────────────

async def test_parse_without_registry_is_503(bare_client):
    resp = await bare_client.post(PARSE_URL, json={"number": "510108197205052137"})
    assert resp.status_code == 503
    assert resp.json()["error"]["code"] == "DIVISION_DATA_ERROR"
