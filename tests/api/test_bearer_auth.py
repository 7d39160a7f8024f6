"""Bearer Auth — optional static token guarding the plant routes.

Invariants:
    - No token configured → requests pass
    - Token configured → missing/wrong token is 401, correct token reaches the handler
    - Health probes are never guarded
"""

import pytest


@pytest.fixture
def settings():
    from plants.config import Settings
    return Settings(plant_store="memory", api_bearer_token="s3cret")


async def test_missing_token_returns_401(client):
    res = await client.get("/v1/plants/Cactus")
    assert res.status_code == 401
    assert res.headers["www-authenticate"] == "Bearer"


async def test_wrong_token_returns_401(client):
    res = await client.get(
        "/v1/plants/Cactus", headers={"Authorization": "Bearer nope"},
    )
    assert res.status_code == 401


async def test_correct_token_reaches_handler(client):
    headers = {"Authorization": "Bearer s3cret"}
    res = await client.post(
        "/v1/plants", json={"name": "Cactus", "description": "spiky"},
        headers=headers,
    )
    assert res.status_code == 200
    res = await client.get("/v1/plants/Fern", headers=headers)
    assert res.status_code == 404


async def test_health_is_not_guarded(client):
    res = await client.get("/v1/health/")
    assert res.status_code == 200
