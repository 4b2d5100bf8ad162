"""Dependency injection for API routes."""

from fastapi import Request
from registry_api.config import Settings
from user_registry.services.user_registry import UserRegistry


def get_app_settings(request: Request) -> Settings:
    """Get the settings the running application was built with.

    Args:
        request: Incoming request

    Returns:
        Settings instance stored on ``app.state``
    """
    return request.app.state.settings


def get_user_registry(request: Request) -> UserRegistry:
    """Get the registry owned by the running application.

    The registry is constructed once by ``create_app`` and stored on
    ``app.state``.

    Args:
        request: Incoming request

    Returns:
        UserRegistry instance
    """
    return request.app.state.user_registry
