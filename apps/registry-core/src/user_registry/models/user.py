"""User model for the user registry."""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """User entity model.

    The email is kept as a plain string. Its format is checked by the registry
    on create, after the duplicate id check.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "4",
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
            }
        },
    )

    id: str = Field(..., description="Unique identifier for the user")
    name: str = Field(..., description="Name of the user")
    email: str = Field(..., description="Email address of the user")


# Users present in every freshly started registry.
SEED_USERS: tuple[User, ...] = (
    User(id="1", name="Tom", email="tom@email.com"),
    User(id="2", name="Ann", email="ann@email.com"),
    User(id="3", name="Jack", email="jack@email.com"),
)
