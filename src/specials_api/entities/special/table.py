"""Special database table model."""

from decimal import Decimal

from sqlmodel import Field

from src.specials_api.entities._base import EntityTable


class SpecialTable(EntityTable, table=True):
    """Database persistence model for specials."""

    __tablename__ = "specials"

    title: str
    description: str | None = None
    price: Decimal = Field(max_digits=10, decimal_places=2)
    is_active: bool = Field(default=True, index=True)
