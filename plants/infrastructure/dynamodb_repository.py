"""DynamoDB Plant Repository — point operations against one table, with error mapping.

Invariants:
    - Validation runs before any store call (no round-trip for bad input)
    - Get/Delete: absent item, empty attribute map, or decoded empty name → NotFoundError
    - Update sets description only; vendor and price are never touched
    - Update is an upsert unless update_creates_missing=False, in which case a
      failed attribute_exists(#name) condition → NotFoundError
    - All other ClientError/BotoCoreError mapped to TransientStoreError (core/errors.py)

Design Decisions:
    - Low-level client + attribute codec over the resource API: explicit wire format,
      and botocore Stubber can assert exact request parameters in tests
    - Blocking boto3 calls run via asyncio.to_thread: the client is thread-safe and
      cancelling the awaiting task abandons the call
    - No retry layer here — botocore's retry config owns throttling backoff
"""

import asyncio
import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from plants.core.attribute_codec import (
    decode_plant, encode_key, encode_plant, encode_value,
)
from plants.core.errors import (
    ErrorContext, NotFoundError, SerializationError, TransientStoreError,
)
from plants.core.plant import Plant, require_name, require_writable

logger = logging.getLogger(__name__)

_CONDITION_FAILED = "ConditionalCheckFailedException"


class DynamoDBPlantRepository:
    """PlantRepository backed by a boto3 DynamoDB client."""

    def __init__(
        self, client: Any, table_name: str, update_creates_missing: bool = True,
    ):
        self._client = client
        self.table_name = table_name
        self.update_creates_missing = update_creates_missing

    async def create(self, plant: Plant) -> Plant:
        require_writable(plant, "create")
        output = await self._call(
            "put_item", plant.name,
            TableName=self.table_name, Item=encode_plant(plant),
        )
        # PutItem echoes nothing by default; merge whatever comes back
        created = decode_plant(output.get("Attributes"), base=plant)
        if not created.name:
            raise SerializationError(
                "store echoed a plant without a name",
                ErrorContext(plant_name=plant.name, operation="put_item"),
            )
        logger.info("Plant created", extra={"plant_name": created.name})
        return created

    async def get(self, name: str) -> Plant:
        require_name(name, "get")
        output = await self._call(
            "get_item", name, TableName=self.table_name, Key=encode_key(name),
        )
        attributes = output.get("Item")
        if not attributes:
            raise NotFoundError(name, ErrorContext(operation="get_item"))
        plant = decode_plant(attributes)
        if not plant.name:
            raise NotFoundError(name, ErrorContext(operation="get_item"))
        return plant

    async def update(self, plant: Plant) -> None:
        require_writable(plant, "update")
        params: dict[str, Any] = {
            "TableName": self.table_name,
            "Key": encode_key(plant.name),
            "UpdateExpression": "SET #description = :description",
            "ExpressionAttributeNames": {"#description": "description"},
            "ExpressionAttributeValues": {
                ":description": encode_value(plant.description),
            },
        }
        if not self.update_creates_missing:
            params["ConditionExpression"] = "attribute_exists(#name)"
            params["ExpressionAttributeNames"]["#name"] = "name"
        await self._call("update_item", plant.name, **params)
        logger.info("Plant updated", extra={"plant_name": plant.name})

    async def delete(self, name: str) -> Plant:
        require_name(name, "delete")
        output = await self._call(
            "delete_item", name,
            TableName=self.table_name, Key=encode_key(name),
            ReturnValues="ALL_OLD",
        )
        attributes = output.get("Attributes")
        if not attributes:
            raise NotFoundError(name, ErrorContext(operation="delete_item"))
        plant = decode_plant(attributes)
        if not plant.name:
            raise NotFoundError(name, ErrorContext(operation="delete_item"))
        logger.info("Plant deleted", extra={"plant_name": name})
        return plant

    async def ping(self) -> bool:
        """Check table reachability (for readiness probes)."""
        try:
            await asyncio.to_thread(
                self._client.describe_table, TableName=self.table_name,
            )
            return True
        except (ClientError, BotoCoreError) as e:
            logger.error(f"DynamoDB health check failed: {e}")
            return False

    async def _call(self, operation: str, plant_name: str, **params) -> dict:
        """Run one client operation off the event loop, mapping store errors."""
        method = getattr(self._client, operation)
        try:
            return await asyncio.to_thread(method, **params)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "Unknown")
            if code == _CONDITION_FAILED and "ConditionExpression" in params:
                raise NotFoundError(plant_name, ErrorContext(operation=operation))
            logger.error(
                f"DynamoDB {operation} failed: {e}",
                extra={"plant_name": plant_name, "operation": operation},
            )
            raise TransientStoreError(
                code, operation,
                ErrorContext(plant_name=plant_name, debug_info={"aws_code": code}),
            )
        except BotoCoreError as e:
            logger.error(
                f"DynamoDB {operation} failed: {e}",
                extra={"plant_name": plant_name, "operation": operation},
            )
            raise TransientStoreError(
                type(e).__name__, operation, ErrorContext(plant_name=plant_name),
            )
