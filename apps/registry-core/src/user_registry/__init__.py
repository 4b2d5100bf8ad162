"""In-memory user registry core."""

from user_registry.errors import (
    DuplicateUserError,
    InvalidEmailError,
    RegistryError,
    RegistryErrorKind,
    UserNotFoundError,
)
from user_registry.models import SEED_USERS, User
from user_registry.services import Outcome, UserRegistry, is_valid_email

__all__ = [
    "SEED_USERS",
    "DuplicateUserError",
    "InvalidEmailError",
    "Outcome",
    "RegistryError",
    "RegistryErrorKind",
    "User",
    "UserNotFoundError",
    "UserRegistry",
    "is_valid_email",
]
