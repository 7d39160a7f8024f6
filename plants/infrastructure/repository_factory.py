"""Repository Factory — explicit construction of the store client and repository.

Invariants:
    - The boto3 client is built here, once, and injected — no import-time globals
    - plant_store="memory" never touches AWS

Design Decisions:
    - botocore "standard" retry mode owns throttling retries (ADR: no retry layer in data access)
"""

import logging

import boto3
from botocore.config import Config

from plants.config import Settings
from plants.core.repository_protocols import PlantRepository
from plants.infrastructure.dynamodb_repository import DynamoDBPlantRepository
from plants.infrastructure.memory_repository import InMemoryPlantRepository

logger = logging.getLogger(__name__)


def build_dynamodb_client(settings: Settings):
    """Create a low-level DynamoDB client from settings."""
    return boto3.client(
        "dynamodb",
        region_name=settings.aws_region,
        endpoint_url=settings.dynamodb_endpoint_url,
        config=Config(
            retries={
                "max_attempts": settings.dynamodb_max_attempts,
                "mode": "standard",
            },
        ),
    )


def build_plant_repository(settings: Settings) -> PlantRepository:
    """Build the configured PlantRepository implementation."""
    if settings.plant_store == "memory":
        logger.warning("Using in-memory plant store — data is lost on restart")
        return InMemoryPlantRepository(
            update_creates_missing=settings.update_creates_missing,
        )
    logger.info(
        f"Using DynamoDB table {settings.plants_table_name} "
        f"in {settings.aws_region}",
    )
    return DynamoDBPlantRepository(
        build_dynamodb_client(settings),
        settings.plants_table_name,
        update_creates_missing=settings.update_creates_missing,
    )
