"""API Dependencies — repository lookup and request body decoding.

Invariants:
    - The repository comes from app.state, set by create_app or the lifespan
    - Body decode failures raise RequestDecodeError (→ 500); field validation
      is left to the repository
"""

from fastapi import Request
from pydantic import ValidationError as PydanticValidationError

from plants.config import Settings, get_settings
from plants.core.errors import RequestDecodeError
from plants.core.plant import Plant
from plants.core.repository_protocols import PlantRepository


def get_plant_repository(request: Request) -> PlantRepository:
    """FastAPI dependency for the configured repository."""
    repository = getattr(request.app.state, "plant_repository", None)
    if repository is None:
        raise RuntimeError("Plant repository not initialized")
    return repository


def get_app_settings(request: Request) -> Settings:
    """Settings the app was built with (falls back to the process settings)."""
    return getattr(request.app.state, "settings", None) or get_settings()


async def decode_plant_body(request: Request) -> Plant:
    """Decode the JSON request body into a Plant.

    Strict mode: JSON strings are not coerced into numbers.
    """
    raw = await request.body()
    try:
        return Plant.model_validate_json(raw, strict=True)
    except PydanticValidationError as e:
        raise RequestDecodeError(
            "; ".join(err["msg"] for err in e.errors()),
        )
