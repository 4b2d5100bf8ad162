"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import HTTPException
from fastapi.responses import JSONResponse
from registry_api.config import Settings, get_settings
from registry_api.middleware import get_cors_headers, setup_middleware
from registry_api.routes import api_router
from user_registry.services.user_registry import UserRegistry

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, registry: UserRegistry | None = None) -> FastAPI:
    """Build the application around a single user registry.

    Args:
        settings: Application settings, read from the environment when omitted
        registry: Registry to serve, a new one is constructed when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    if registry is None:
        registry = UserRegistry() if settings.seed_users else UserRegistry(seed=())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Handle application lifespan events."""
        logger.info("%s v%s started", settings.app_name, settings.app_version)
        logger.info("Environment: %s", settings.environment)
        logger.info("Registered users at startup: %d", len(app.state.user_registry))

        yield

        logger.info("%s shutting down", settings.app_name)

    app = FastAPI(
        title=settings.docs_title,
        description=settings.docs_description,
        version=settings.app_version,
        contact={
            "name": settings.contact_name,
            "url": settings.contact_url,
            "email": settings.contact_email,
        },
        license_info={"name": settings.license_name},
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.user_registry = registry

    # Setup middleware (must be before exception handlers)
    setup_middleware(app, ui_url=settings.ui_url, environment=settings.environment)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Return a 500 with CORS headers for unhandled errors."""
        if isinstance(exc, HTTPException):
            raise exc

        logger.error("Unhandled exception: %s", exc, exc_info=True)

        origin = request.headers.get("origin")
        cors_headers = get_cors_headers(origin, ui_url=settings.ui_url, environment=settings.environment)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
            headers=cors_headers,
        )

    app.include_router(api_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "registry_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )
