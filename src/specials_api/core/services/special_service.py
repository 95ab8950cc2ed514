"""Special service.

Wraps ``SpecialRepository`` with DTO handling. Reads never raise for a
missing special; updates and deletes translate a missing target into ``None``
and let every other store failure propagate to the caller.
"""

from loguru import logger
from pydantic import BaseModel

from src.specials_api.core.errors import RecordNotFoundError
from src.specials_api.entities.special import Special, SpecialRepository


class CreateSpecialDto(BaseModel):
    title: str
    description: str | None = None
    price: float
    is_active: bool | None = None


class UpdateSpecialDto(BaseModel):
    """Partial special update; only explicitly set fields are applied."""

    title: str | None = None
    description: str | None = None
    price: float | None = None
    is_active: bool | None = None

    def changes(self) -> dict[str, object]:
        return self.model_dump(exclude_unset=True)


class SpecialService:
    def __init__(self, repository: SpecialRepository) -> None:
        self._repository = repository

    def get_all_specials(self) -> list[Special]:
        return self._repository.list_all()

    def get_active_specials(self) -> list[Special]:
        return self._repository.list_active()

    def get_special_by_id(self, special_id: str) -> Special | None:
        return self._repository.get(special_id)

    def create_special(self, data: CreateSpecialDto) -> Special:
        # Unset optionals are dropped so the store applies its defaults
        special = self._repository.create(data.model_dump(exclude_none=True))
        logger.info("Created special {}", special.id)
        return special

    def update_special(self, special_id: str, data: UpdateSpecialDto) -> Special | None:
        try:
            return self._repository.update(special_id, data.changes())
        except RecordNotFoundError:
            logger.debug("Update skipped, special {} not found", special_id)
            return None

    def delete_special(self, special_id: str) -> Special | None:
        try:
            special = self._repository.delete(special_id)
        except RecordNotFoundError:
            logger.debug("Delete skipped, special {} not found", special_id)
            return None
        logger.info("Deleted special {}", special_id)
        return special
