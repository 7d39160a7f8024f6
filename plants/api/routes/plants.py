"""Plant Routes — HTTP verbs mapped one-to-one onto repository operations.

Invariants:
    - Routes never validate fields; the repository owns the write invariant
    - Every failure propagates as PlantsError to the global handler (one translation step)
    - Success is always 200 with the resulting plant as JSON (absent optionals omitted)
    - PUT responds with the submitted plant; update itself returns nothing
"""

import logging

from fastapi import APIRouter, Depends

from plants.api.auth import require_bearer_token
from plants.api.dependencies import decode_plant_body, get_plant_repository
from plants.core.plant import Plant
from plants.core.repository_protocols import PlantRepository

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/v1/plants", tags=["plants"],
    dependencies=[Depends(require_bearer_token)],
)


@router.post("", response_model=Plant, response_model_exclude_none=True)
async def create_plant(
    plant: Plant = Depends(decode_plant_body),
    repository: PlantRepository = Depends(get_plant_repository),
):
    """Create (or overwrite) a plant."""
    return await repository.create(plant)


@router.get("/{name}", response_model=Plant, response_model_exclude_none=True)
async def get_plant(
    name: str, repository: PlantRepository = Depends(get_plant_repository),
):
    """Get a plant by name."""
    return await repository.get(name)


@router.put("", response_model=Plant, response_model_exclude_none=True)
async def update_plant(
    plant: Plant = Depends(decode_plant_body),
    repository: PlantRepository = Depends(get_plant_repository),
):
    """Update a plant's description."""
    await repository.update(plant)
    return plant


@router.delete("/{name}", response_model=Plant, response_model_exclude_none=True)
async def delete_plant(
    name: str, repository: PlantRepository = Depends(get_plant_repository),
):
    """Delete a plant, returning its last-known value."""
    plant = await repository.delete(name)
    logger.info("Plant removed via API", extra={"plant_name": name})
    return plant
