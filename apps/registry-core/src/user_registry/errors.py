"""Error kinds reported by the user registry."""

from enum import Enum


class RegistryErrorKind(str, Enum):
    """Kinds of failure a registry operation can report."""

    DUPLICATE_USER = "duplicate_user"
    INVALID_EMAIL = "invalid_email"
    USER_NOT_FOUND = "user_not_found"


class RegistryError(Exception):
    """Base class for registry failures.

    Every failure carries its kind so the HTTP layer can map it to a status
    code without inspecting the exception type.
    """

    kind: RegistryErrorKind
    default_message: str = "Registry operation failed."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateUserError(RegistryError):
    """A user with the same id is already registered."""

    kind = RegistryErrorKind.DUPLICATE_USER
    default_message = "User with specified id already registered."


class InvalidEmailError(RegistryError):
    """The email address of a new user is not well formed."""

    kind = RegistryErrorKind.INVALID_EMAIL
    default_message = "Email supplied for the new user is invalid."


class UserNotFoundError(RegistryError):
    kind = RegistryErrorKind.USER_NOT_FOUND
    default_message = "User is not found"
