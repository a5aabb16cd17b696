import logging
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pkgsearch.application.api.v1.errors import map_error
from pkgsearch.application.api.v1.routes import health, interactions
from pkgsearch.application.di import create_container
from pkgsearch.config import Config, configure_logging
from pkgsearch.domain.shared.error import PkgSearchError
from pkgsearch.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.dishka_container
    yield
    await container.close()


def create_app(config: Config | None = None, container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application."""
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()

    # Configure logging early
    configure_logging(config.logging)
    logger.info(
        "Starting pkgsearch server: %s v%s (sessions: %s)",
        config.server.name,
        config.server.version,
        config.session.backend.value,
    )

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    logfire.instrument_httpx()
    logfire.instrument_fastapi(app_instance)

    # Setup dependency injection
    setup_dishka(container or create_container(config), app_instance)

    # Register v1 routes with /api/v1 prefix
    app_instance.include_router(health.router, prefix="/api/v1")
    app_instance.include_router(interactions.router, prefix="/api/v1")

    # Global error handler - maps domain and infrastructure errors to HTTP responses
    @app_instance.exception_handler(PkgSearchError)
    async def pkgsearch_error_handler(request: Request, exc: PkgSearchError):
        http_exc = map_error(exc)
        return JSONResponse(
            status_code=http_exc.status_code,
            content=http_exc.detail,
        )

    # Global exception handler - logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: the server command handles this
# In tests: configure in conftest.py
app = create_app()
