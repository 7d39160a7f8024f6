"""Plants API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PlantsError → status by ErrorKind
    - CORS configured from settings (not hardcoded)
    - Repository injected via create_app or built once in the lifespan — never at import

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app(repository=...) for tests: ASGITransport does not run the lifespan,
      so an injected repository is attached to app.state immediately
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from plants.api.error_handlers import register_error_handlers
from plants.api.routes import health, plants
from plants.config import Settings, get_settings
from plants.core.repository_protocols import PlantRepository
from plants.infrastructure.observability import setup_logging
from plants.infrastructure.repository_factory import build_plant_repository

logger = logging.getLogger(__name__)


def create_app(
    repository: PlantRepository | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the FastAPI app, optionally with an injected repository."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        if getattr(app.state, "plant_repository", None) is None:
            app.state.plant_repository = build_plant_repository(settings)
        logger.info("Plants API started")
        yield
        logger.info("Plants API shutting down")

    app = FastAPI(title="Plants API", version="1.0.0", lifespan=lifespan)
    app.state.plant_repository = repository
    app.state.settings = settings

    # CORS from settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Routes: explicit registration
    app.include_router(health.router)
    app.include_router(plants.router)
    return app


app = create_app()
