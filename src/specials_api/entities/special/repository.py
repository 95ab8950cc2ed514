"""Special repository."""

from src.specials_api.entities._repository import EntityRepository

from .entity import Special
from .table import SpecialTable


class SpecialRepository(EntityRepository[Special, SpecialTable]):
    """Data-access layer for specials."""

    entity_type = Special
    table_type = SpecialTable
    entity_name = "Special"

    def list_active(self) -> list[Special]:
        """Active specials, newest first."""
        return self.list_all(SpecialTable.is_active == True)  # noqa: E712
