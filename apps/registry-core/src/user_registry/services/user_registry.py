"""In-memory user registry."""

import logging
import threading
from collections.abc import Iterable

from email_validator import EmailNotValidError, validate_email

from user_registry.errors import DuplicateUserError, InvalidEmailError, UserNotFoundError
from user_registry.models.user import SEED_USERS, User
from user_registry.services.outcome import Outcome

logger = logging.getLogger(__name__)


def is_valid_email(email: str) -> bool:
    """Check the syntax of an email address.

    The whole string must be a bare address: display names, angle brackets
    and surrounding whitespace are rejected. No DNS or mailbox verification
    is performed.
    """
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


class UserRegistry:
    """Authoritative in-memory set of registered users.

    Users are keyed by id. A single lock guards every read and write, so each
    operation sees the mapping either before or after any other operation.
    """

    def __init__(self, seed: Iterable[User] = SEED_USERS) -> None:
        """Initialize the registry.

        Args:
            seed: Users registered at construction time
        """
        self._lock = threading.Lock()
        self._users: dict[str, User] = {}
        for user in seed:
            self._users[user.id] = User(id=user.id, name=user.name, email=user.email)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._users

    def create(self, user: User) -> Outcome[User]:
        """Register a new user.

        The duplicate id check runs before email validation, so an existing id
        is reported even when the email is also invalid.

        Args:
            user: User to register

        Returns:
            Outcome holding the stored user, or a DuplicateUserError or
            InvalidEmailError
        """
        with self._lock:
            if user.id in self._users:
                return Outcome.failure(DuplicateUserError())
            if not is_valid_email(user.email):
                return Outcome.failure(InvalidEmailError())
            new_user = User(id=user.id, name=user.name, email=user.email)
            self._users[new_user.id] = new_user
        logger.info("Created new User: %s", new_user)
        return Outcome.success(new_user)

    def list(self) -> list[User]:
        """Return a snapshot of all registered users in no particular order."""
        with self._lock:
            return list(self._users.values())

    def find_by_email(self, email: str) -> Outcome[User]:
        """Find a user by exact email match.

        The email is not validated. When several users share the email, the
        first one met while iterating is returned and callers must not rely on
        which one that is.

        Args:
            email: Email address to search for

        Returns:
            Outcome holding the matching user, or a UserNotFoundError
        """
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return Outcome.success(user)
        return Outcome.failure(UserNotFoundError())

    def remove_by_id(self, user_id: str) -> Outcome[User]:
        """Remove the user registered under an id.

        Args:
            user_id: Id of the user to remove

        Returns:
            Outcome holding the removed user, or a UserNotFoundError
        """
        with self._lock:
            removed = self._users.pop(user_id, None)
        if removed is None:
            return Outcome.failure(UserNotFoundError())
        logger.info("Removed User: %s", removed)
        return Outcome.success(removed)
