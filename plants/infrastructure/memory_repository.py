"""In-Memory Plant Repository — deterministic stand-in for DynamoDB.

Invariants:
    - Records stored as attribute maps, through the same codec as the real adapter
    - Same validation, NotFound and upsert outcomes as DynamoDBPlantRepository
    - No await inside an operation: each call is atomic on the event loop

Design Decisions:
    - Encoding through attribute_codec instead of storing Plant objects: serialization
      bugs surface in fast tests, not only against DynamoDB
"""

import logging

from plants.core.attribute_codec import (
    AttributeMap, decode_plant, encode_key, encode_plant, encode_value,
)
from plants.core.errors import ErrorContext, NotFoundError
from plants.core.plant import Plant, require_name, require_writable

logger = logging.getLogger(__name__)


class InMemoryPlantRepository:
    """PlantRepository backed by a process-local dict."""

    def __init__(self, update_creates_missing: bool = True):
        self.update_creates_missing = update_creates_missing
        self._items: dict[str, AttributeMap] = {}

    async def create(self, plant: Plant) -> Plant:
        require_writable(plant, "create")
        self._items[plant.name] = encode_plant(plant)
        return plant.model_copy()

    async def get(self, name: str) -> Plant:
        require_name(name, "get")
        attributes = self._items.get(name)
        if not attributes:
            raise NotFoundError(name, ErrorContext(operation="get"))
        plant = decode_plant(attributes)
        if not plant.name:
            raise NotFoundError(name, ErrorContext(operation="get"))
        return plant

    async def update(self, plant: Plant) -> None:
        require_writable(plant, "update")
        existing = self._items.get(plant.name)
        if existing is None:
            if not self.update_creates_missing:
                raise NotFoundError(plant.name, ErrorContext(operation="update"))
            logger.info(
                "Update created a missing plant", extra={"plant_name": plant.name},
            )
            existing = encode_key(plant.name)
        attributes = dict(existing)
        attributes["description"] = encode_value(plant.description)
        self._items[plant.name] = attributes

    async def delete(self, name: str) -> Plant:
        require_name(name, "delete")
        attributes = self._items.pop(name, None)
        if not attributes:
            raise NotFoundError(name, ErrorContext(operation="delete"))
        plant = decode_plant(attributes)
        if not plant.name:
            raise NotFoundError(name, ErrorContext(operation="delete"))
        return plant

    async def ping(self) -> bool:
        return True
