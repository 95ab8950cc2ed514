"""User database table model."""

from sqlmodel import Field

from src.specials_api.entities._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users."""

    __tablename__ = "users"

    email: str = Field(unique=True, index=True)
    name: str | None = None
