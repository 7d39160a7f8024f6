"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Settings never construct clients; infrastructure/repository_factory.py does

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for all non-secret settings: works against DynamoDB Local out-of-the-box
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Store
    plant_store: Literal["dynamodb", "memory"] = "dynamodb"
    plants_table_name: str = "plants_v1"
    aws_region: str = "us-east-1"
    dynamodb_endpoint_url: str | None = None
    dynamodb_max_attempts: int = 3

    # ADR: UpdateItem creates missing records. Kept as the default;
    # set False to get NotFound on update of an absent plant.
    update_creates_missing: bool = True

    @field_validator("dynamodb_endpoint_url", mode="before")
    @classmethod
    def blank_endpoint_is_none(cls, v: str | None) -> str | None:
        """An empty DYNAMODB_ENDPOINT_URL means the regional endpoint."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # API
    host: str = "0.0.0.0"
    port: int = 8080
    api_bearer_token: str | None = None
    cors_origins: list[str] = []

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
