"""User API routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from registry_api.services import get_user_registry
from user_registry.errors import RegistryErrorKind
from user_registry.models.user import User
from user_registry.services.outcome import Outcome
from user_registry.services.user_registry import UserRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)

ERROR_STATUS: dict[RegistryErrorKind, int] = {
    RegistryErrorKind.DUPLICATE_USER: status.HTTP_400_BAD_REQUEST,
    RegistryErrorKind.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    RegistryErrorKind.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def _resolve(outcome: Outcome[User], action: str) -> User:
    """Return the user of a successful outcome or raise the matching HTTP error."""
    if outcome.error is None:
        return outcome.value  # type: ignore[return-value]
    logger.error("Attempt to %s failed due to the following error: %s", action, outcome.error.message)
    raise HTTPException(status_code=ERROR_STATUS[outcome.error.kind], detail=outcome.error.message)


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user.",
    responses={400: {"description": "Duplicate id or invalid email"}},
)
@router.post(
    "/",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user.",
    responses={400: {"description": "Duplicate id or invalid email"}},
)
async def create_user(user: User, registry: UserRegistry = Depends(get_user_registry)) -> User:
    """Create a user from the request payload and return the stored record."""
    logger.info("Received a request to create a new user")
    return _resolve(registry.create(user), f"create User {user}")


@router.get("", response_model=list[User], summary="Get all users.")
@router.get("/", response_model=list[User], summary="Get all users.")
async def list_users(registry: UserRegistry = Depends(get_user_registry)) -> list[User]:
    logger.info("Received a request to list users")
    return registry.list()


@router.get(
    "/email",
    response_model=User,
    summary="Get user by email.",
    responses={404: {"description": "No user with this email"}},
)
async def get_user_by_email(
    email: str = Query(..., description="The email address of the user."),
    registry: UserRegistry = Depends(get_user_registry),
) -> User:
    """Return a user with the given email.

    If several users share the email, which one is returned is unspecified.
    """
    logger.info("Received a request to get a User by email")
    return _resolve(registry.find_by_email(email), f"find a User with email {email}")


@router.delete(
    "/{user_id}",
    response_model=User,
    summary="Remove User with specified id.",
    responses={404: {"description": "No user with this id"}},
)
async def delete_user(user_id: str, registry: UserRegistry = Depends(get_user_registry)) -> User:
    """Delete a user and return the deleted record."""
    logger.info("Received request to delete user with id: %s", user_id)
    return _resolve(registry.remove_by_id(user_id), f"delete a User with id {user_id}")
