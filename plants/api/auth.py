"""Bearer Auth — optional static-token check ahead of the plant handlers.

Invariants:
    - api_bearer_token unset → every request passes
    - api_bearer_token set → missing or wrong token gets 401 before the handler runs

Design Decisions:
    - HTTPBearer(auto_error=False): we own the 401 shape instead of FastAPI's 403
    - hmac.compare_digest: constant-time comparison
"""

import hmac

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from plants.api.dependencies import get_app_settings
from plants.config import Settings

bearer_scheme = HTTPBearer(auto_error=False)


async def require_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
) -> None:
    """Reject the request unless it carries the configured bearer token."""
    expected = settings.api_bearer_token
    if not expected:
        return
    if credentials is None or not hmac.compare_digest(
        credentials.credentials.encode(), expected.encode(),
    ):
        raise HTTPException(
            status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )
