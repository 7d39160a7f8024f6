"""API test fixtures — FastAPI app over the in-memory repository + async HTTP client.

Invariants:
    - Every test gets a fresh InMemoryPlantRepository
    - Repository injected through create_app, so no lifespan is needed

Design Decisions:
    - httpx ASGITransport: exercises the real routing, dependencies and error handlers
"""

import pytest
from httpx import ASGITransport, AsyncClient

from plants.config import Settings
from plants.infrastructure.memory_repository import InMemoryPlantRepository
from plants.main import create_app


@pytest.fixture
def repository():
    return InMemoryPlantRepository()


@pytest.fixture
def settings():
    return Settings(plant_store="memory", api_bearer_token=None)


@pytest.fixture
def app(repository, settings):
    return create_app(repository=repository, settings=settings)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
