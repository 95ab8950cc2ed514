"""Entity: Special."""

from decimal import Decimal

from pydantic import Field

from src.specials_api.entities._base import Entity


class Special(Entity):
    """Special entity representing a priced offer on the menu."""

    title: str = Field(description="Title")
    description: str | None = Field(default=None, description="Description")
    price: Decimal = Field(description="Price, two decimal places")
    is_active: bool = Field(default=True, description="Whether the special is offered")
