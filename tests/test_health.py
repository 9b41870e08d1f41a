import pytest


@pytest.mark.asyncio
async def test_health_endpoint(client):
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["service"] == "mottu-api"
    assert data["version"] == "1.0.0"


@pytest.mark.asyncio
async def test_cors_allows_any_origin(client):
    response = await client.get("/health", headers={"Origin": "http://example.com"})

    assert response.headers["access-control-allow-origin"] == "*"
