"""In-Memory Plant Repository — the data-access properties against the fake.

Invariants:
    - Empty name/description → ValidationError on create and update
    - Unknown name → NotFoundError on get and delete
    - create then get round-trips; delete returns the prior value
    - update changes description only; on a missing name it creates the record
"""

from uuid import uuid4

import pytest

from plants.core.errors import NotFoundError, ValidationError
from plants.core.plant import Plant
from plants.infrastructure.memory_repository import InMemoryPlantRepository


@pytest.fixture
def repository():
    return InMemoryPlantRepository()


@pytest.mark.parametrize("plant", [
    Plant(name="", description=""),
    Plant(name="", description="pointy"),
    Plant(name="Cactus", description=""),
])
async def test_writes_reject_empty_fields(repository, plant):
    with pytest.raises(ValidationError):
        await repository.create(plant)
    with pytest.raises(ValidationError):
        await repository.update(plant)


async def test_unknown_name_is_not_found(repository):
    with pytest.raises(NotFoundError):
        await repository.get("Fern")
    with pytest.raises(NotFoundError):
        await repository.delete("Fern")


async def test_create_then_get_round_trips(repository):
    plant = Plant(name="Cactus", description="pointy", vendor=uuid4(), price=7.25)
    await repository.create(plant)
    assert await repository.get("Cactus") == plant


async def test_delete_returns_prior_value_then_not_found(repository):
    plant = Plant(name="Cactus", description="pointy")
    await repository.create(plant)
    assert await repository.delete("Cactus") == plant
    with pytest.raises(NotFoundError):
        await repository.get("Cactus")


async def test_update_changes_description_only(repository):
    vendor = uuid4()
    await repository.create(
        Plant(name="Cactus", description="pointy", vendor=vendor, price=3.5),
    )
    await repository.update(
        Plant(name="Cactus", description="still pointy", vendor=uuid4(), price=99.0),
    )
    assert await repository.get("Cactus") == Plant(
        name="Cactus", description="still pointy", vendor=vendor, price=3.5,
    )


async def test_update_missing_name_creates_record(repository):
    await repository.update(Plant(name="Fern", description="feathery", price=2.0))
    # only the key and description are written
    assert await repository.get("Fern") == Plant(name="Fern", description="feathery")


async def test_update_missing_name_without_upsert_is_not_found():
    repository = InMemoryPlantRepository(update_creates_missing=False)
    with pytest.raises(NotFoundError):
        await repository.update(Plant(name="Fern", description="feathery"))
    with pytest.raises(NotFoundError):
        await repository.get("Fern")


async def test_returned_plant_is_a_copy(repository):
    plant = Plant(name="Cactus", description="pointy")
    created = await repository.create(plant)
    created.description = "mutated"
    assert (await repository.get("Cactus")).description == "pointy"


async def test_ping_is_always_ready(repository):
    assert await repository.ping() is True
