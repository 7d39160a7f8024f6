"""Error Handlers — the single translation from error kind to HTTP status.

Invariants:
    - PlantsError → status from STATUS_BY_KIND, body from to_response()
    - VALIDATION → 400, NOT_FOUND → 404, everything else → 500
    - Exception (catch-all) → 500, never leaks internal details
    - Handlers never inspect store-specific details

Design Decisions:
    - Status keyed on ErrorKind, not on exception class or message (ADR: closed taxonomy)
    - Two-layer handler: domain (PlantsError), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from plants.core.errors import ErrorKind, ErrorSeverity, PlantsError

logger = logging.getLogger(__name__)

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.SERIALIZATION: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.TRANSIENT_STORE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.REQUEST_DECODE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(kind: ErrorKind) -> int:
    """HTTP status for an error kind."""
    return STATUS_BY_KIND.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_plants_error_handler(app)
    _register_generic_error_handler(app)


def _register_plants_error_handler(app: FastAPI) -> None:
    """Register data-access error handler."""

    @app.exception_handler(PlantsError)
    async def plants_error_handler(request: Request, exc: PlantsError):
        """Handle all Plants domain/infrastructure errors."""
        status_code = status_for(exc.kind)
        log = logger.warning if status_code < 500 else logger.error
        log(
            f"PlantsError: {exc.message}",
            extra={
                "error_code": exc.code,
                "error_kind": exc.kind.value,
                "plant_name": exc.context.plant_name,
                "path": request.url.path,
            },
        )
        return JSONResponse(status_code=status_code, content=exc.to_response())


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "kind": "internal",
                    "message": "An unexpected error occurred",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
