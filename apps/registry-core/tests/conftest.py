"""Pytest configuration for registry core tests."""

import pytest
from user_registry.services.user_registry import UserRegistry


@pytest.fixture
def registry() -> UserRegistry:
    """Create a registry holding the seed users."""
    return UserRegistry()
