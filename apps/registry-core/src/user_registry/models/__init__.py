"""Models for the user registry."""

from user_registry.models.user import SEED_USERS, User

__all__ = [
    "SEED_USERS",
    "User",
]
