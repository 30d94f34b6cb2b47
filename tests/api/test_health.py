"""Health & Readiness — liveness always 200, readiness tracks the registry."""


async def test_liveness(bare_client):
    resp = await bare_client.get("/api/v1/health/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


async def test_ready_with_registry(client, registry):
    resp = await client.get("/api/v1/health/ready")
    assert resp.status_code == 200
    assert resp.json() == {
        "status": "ready",
        "checks": {"division_registry": len(registry)},
    }


async def test_not_ready_without_registry(bare_client):
    resp = await bare_client.get("/api/v1/health/ready")
    assert resp.status_code == 503
    assert resp.json()["reason"] == "division_registry_unavailable"
