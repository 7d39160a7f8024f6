"""Error Hierarchy — typed exceptions for every Plants data-access failure mode.

Invariants:
    - Every error carries a kind (ErrorKind), code (str) and severity (ErrorSeverity)
    - ErrorKind is closed: callers switch on kind, never on message text
    - Domain errors (validation, not found) are recoverable; store errors are critical
    - to_response() produces the REST envelope; no botocore details leak into it

Design Decisions:
    - Single hierarchy with PlantsError base: FastAPI global handler catches all (ADR: uniform error shape)
    - HTTP status lives in the API layer, keyed on kind (ADR: one translation step)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorKind(str, Enum):
    """Closed discriminant for every failure the data-access layer can surface."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    SERIALIZATION = "serialization"
    TRANSIENT_STORE = "transient_store"
    REQUEST_DECODE = "request_decode"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    plant_name: str | None = None
    operation: str | None = None
    field_name: str | None = None
    debug_info: dict[str, Any] | None = None


class PlantsError(Exception):
    """Base exception for all Plants errors."""

    def __init__(
        self,
        message: str,
        code: str,
        kind: ErrorKind,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "kind": self.kind.value,
                "message": self.message,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "plant_name": self.context.plant_name,
                    "operation": self.context.operation,
                    "field": self.context.field_name,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class ValidationError(PlantsError):
    """A required field of the caller's input is empty."""
    def __init__(self, field: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = field
        super().__init__(
            f"Missing required field: {field}",
            "VALIDATION_ERROR", ErrorKind.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.field = field


class NotFoundError(PlantsError):
    """No record exists for the key (includes a record that decodes empty)."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.plant_name = name
        super().__init__(
            f"Plant '{name}' not found",
            "PLANT_NOT_FOUND", ErrorKind.NOT_FOUND,
            ErrorSeverity.ERROR, ctx,
        )
        self.name = name


# ─── Infrastructure Errors ──────────────────────────────────────

class SerializationError(PlantsError):
    """A store response could not be interpreted as a Plant."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Serialization failed: {message}",
            "SERIALIZATION_ERROR", ErrorKind.SERIALIZATION,
            ErrorSeverity.CRITICAL, context,
        )


class TransientStoreError(PlantsError):
    """Store-level failure: connectivity, throttling, or anything unclassified."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Store {operation} failed: {message}",
            "STORE_ERROR", ErrorKind.TRANSIENT_STORE,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.operation = operation


class RequestDecodeError(PlantsError):
    """HTTP request body could not be decoded into a Plant."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Request body could not be decoded: {message}",
            "REQUEST_DECODE_ERROR", ErrorKind.REQUEST_DECODE,
            ErrorSeverity.ERROR, context,
        )
