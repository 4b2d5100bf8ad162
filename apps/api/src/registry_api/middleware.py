"""CORS middleware for the User Registry API."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)

# Verbs served by the users routes.
ALLOWED_METHODS = ["GET", "POST", "DELETE", "OPTIONS"]

DEV_ENVIRONMENTS = {"development", "dev", "local"}

DEV_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def get_allowed_origins(ui_url: str | None = None, environment: str = "development") -> list[str]:
    """Get list of allowed CORS origins.

    Args:
        ui_url: URL of the UI consuming the registry
        environment: Environment name (development, production, etc.)

    Returns:
        Deduplicated list of allowed origin URLs
    """
    origins: list[str] = []

    if ui_url:
        base = ui_url.rstrip("/")
        origins.append(base)
        # Accept the same host over the other scheme.
        if base.startswith("http://"):
            origins.append("https://" + base[len("http://") :])
        elif base.startswith("https://"):
            origins.append("http://" + base[len("https://") :])

    if environment.lower() in DEV_ENVIRONMENTS:
        origins.extend(DEV_ORIGINS)

    return list(dict.fromkeys(origins))


def get_cors_headers(origin: str | None, ui_url: str | None = None, environment: str = "development") -> dict[str, str]:
    """Build CORS headers for error responses produced outside the middleware.

    Args:
        origin: The origin from the request header
        ui_url: URL of the UI consuming the registry
        environment: Environment name

    Returns:
        Dictionary of CORS headers, empty if origin is not allowed
    """
    if not origin or origin not in get_allowed_origins(ui_url, environment):
        return {}
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
        "Access-Control-Allow-Headers": "*",
    }


def setup_middleware(app: FastAPI, ui_url: str | None = None, environment: str = "development") -> None:
    """Install CORS middleware on the application.

    Args:
        app: FastAPI application instance
        ui_url: URL of the UI consuming the registry
        environment: Environment name
    """
    allowed_origins = get_allowed_origins(ui_url, environment)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=ALLOWED_METHODS,
        allow_headers=["*"],
    )

    logger.info("CORS enabled for origins: %s (environment=%s)", allowed_origins, environment)
