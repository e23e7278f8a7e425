"""Health routes — liveness and database readiness."""


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}
