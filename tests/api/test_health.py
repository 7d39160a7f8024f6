"""Health Probes — liveness is unconditional, readiness follows the store."""

from unittest.mock import AsyncMock

from httpx import ASGITransport, AsyncClient

from plants.config import Settings
from plants.main import create_app


async def test_liveness_returns_200(client):
    res = await client.get("/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_memory_store_returns_200(client):
    res = await client.get("/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["store"] == "healthy"


async def test_readiness_returns_503_when_store_unreachable():
    repository = AsyncMock()
    repository.ping.return_value = False
    app = create_app(
        repository=repository, settings=Settings(plant_store="memory"),
    )
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "store_unavailable"
