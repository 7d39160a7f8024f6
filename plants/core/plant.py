"""Plant Entity — the single record type, keyed by name.

Invariants:
    - name and description must be non-empty for any write
    - name uniquely identifies a record in the store
    - Missing or null name/description decode to "" so the write invariant is
      enforced here (400), not by body decoding
    - A null body decodes to an empty Plant (400 from the write invariant)

Design Decisions:
    - Pydantic model over dataclass: JSON decode/encode at the API boundary for free
    - Invariant checks as pure functions: shared by every repository implementation
"""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from plants.core.errors import ValidationError, ErrorContext


class Plant(BaseModel):
    """A named plant record."""
    name: str = ""
    description: str = ""
    vendor: UUID | None = None
    price: float | None = Field(None, allow_inf_nan=False)

    @model_validator(mode="before")
    @classmethod
    def null_body_is_empty(cls, data):
        return {} if data is None else data

    @field_validator("name", "description", mode="before")
    @classmethod
    def null_text_is_empty(cls, v):
        return "" if v is None else v


def require_name(name: str, operation: str) -> None:
    """Raise ValidationError if the key is empty."""
    if not name:
        raise ValidationError("name", ErrorContext(operation=operation))


def require_writable(plant: Plant, operation: str) -> None:
    """Raise ValidationError if name or description is empty."""
    require_name(plant.name, operation)
    if not plant.description:
        raise ValidationError(
            "description",
            ErrorContext(plant_name=plant.name, operation=operation),
        )
