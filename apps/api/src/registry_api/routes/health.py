"""Health check routes."""

from fastapi import APIRouter, Depends
from registry_api.config import Settings
from registry_api.models.health import HealthCheckResponse
from registry_api.services import get_app_settings, get_user_registry
from user_registry.services.user_registry import UserRegistry

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    settings: Settings = Depends(get_app_settings),
    registry: UserRegistry = Depends(get_user_registry),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, version and registry size
    """
    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        registered_users=len(registry),
    )
