"""Health Probe — liveness endpoint returns service identity."""


async def test_health_returns_200(client):
    res = await client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["service"] == "payment-instructions-api"
