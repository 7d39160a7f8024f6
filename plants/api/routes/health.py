"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /v1/health/ always returns 200 if process is up (liveness)
    - GET /v1/health/ready returns 503 if the store is unreachable (readiness)
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from plants.api.dependencies import get_plant_repository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "plants-api"}


@router.get("/ready")
async def readiness_check(repository=Depends(get_plant_repository)):
    """Readiness probe — includes store connectivity."""
    ping = getattr(repository, "ping", None)
    store_ok = await ping() if ping else False
    if not store_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "store_unavailable"},
        )
    return {"status": "ready", "checks": {"store": "healthy"}}
