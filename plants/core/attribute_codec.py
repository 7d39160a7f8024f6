"""Attribute Codec — Plant <-> DynamoDB attribute map, pure and side-effect free.

Invariants:
    - Key map is always {"name": {"S": name}}
    - price encoded as N via Decimal(str(price)) — DynamoDB rejects binary floats
    - Absent optionals are omitted on encode; unknown attributes ignored on decode
    - A NULL name/description decodes to "" (an empty name then reads as not found)
    - Every encode/decode failure surfaces as SerializationError

Design Decisions:
    - boto3 TypeSerializer/TypeDeserializer over hand-written marshalling
      (ADR: same wire format the resource API uses)
    - decode_fields returns only the fields present so callers can merge echoed
      attributes over an existing entity
"""

from decimal import Decimal
from typing import Any

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from pydantic import ValidationError as PydanticValidationError

from plants.core.errors import SerializationError, ErrorContext
from plants.core.plant import Plant

KEY_ATTRIBUTE = "name"
PLANT_FIELDS = ("name", "description", "vendor", "price")
TEXT_FIELDS = ("name", "description")

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()

AttributeMap = dict[str, dict[str, Any]]


def encode_key(name: str) -> AttributeMap:
    """Encode the primary key for a point operation."""
    return {KEY_ATTRIBUTE: _serializer.serialize(name)}


def encode_plant(plant: Plant) -> AttributeMap:
    """Encode a full Plant for PutItem."""
    raw: dict[str, Any] = {
        "name": plant.name,
        "description": plant.description,
    }
    if plant.vendor is not None:
        raw["vendor"] = str(plant.vendor)
    if plant.price is not None:
        raw["price"] = Decimal(str(plant.price))
    try:
        return {key: _serializer.serialize(value) for key, value in raw.items()}
    except (TypeError, ArithmeticError) as e:
        raise SerializationError(
            str(e), ErrorContext(plant_name=plant.name, operation="encode"),
        )


def encode_value(value: str) -> dict[str, Any]:
    """Encode a single string value (update expression placeholders)."""
    return _serializer.serialize(value)


def decode_fields(attributes: AttributeMap | None) -> dict[str, Any]:
    """Decode the known Plant fields present in an attribute map."""
    fields: dict[str, Any] = {}
    for key in PLANT_FIELDS:
        if key not in (attributes or {}):
            continue
        try:
            value = _deserializer.deserialize(attributes[key])
        except (TypeError, ArithmeticError) as e:
            raise SerializationError(
                f"attribute '{key}': {e}", ErrorContext(operation="decode"),
            )
        if isinstance(value, Decimal):
            value = float(value)
        elif value is None and key in TEXT_FIELDS:
            value = ""
        fields[key] = value
    return fields


def decode_plant(attributes: AttributeMap | None, base: Plant | None = None) -> Plant:
    """Decode an attribute map into a Plant, optionally merged over base."""
    merged = base.model_dump() if base else {}
    merged.update(decode_fields(attributes))
    try:
        return Plant.model_validate(merged)
    except PydanticValidationError as e:
        raise SerializationError(
            str(e), ErrorContext(plant_name=merged.get("name"), operation="decode"),
        )
