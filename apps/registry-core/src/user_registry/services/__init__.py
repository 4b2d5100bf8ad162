"""Registry services."""

from user_registry.services.outcome import Outcome
from user_registry.services.user_registry import UserRegistry, is_valid_email

__all__ = [
    "Outcome",
    "UserRegistry",
    "is_valid_email",
]
