"""User domain entity."""

from pydantic import Field

from src.specials_api.entities._base import Entity


class User(Entity):
    """User entity representing a person in the system.

    It inherits from Entity to get an auto-generated UUID identifier and
    managed timestamps.
    """

    email: str = Field(description="User's email address")
    name: str | None = Field(default=None, description="User's display name")
