"""Shared data-access behaviour for the entity repositories.

A repository is the application's view of the entity store: it turns table
rows into domain entities and turns missing rows on mutation into
``RecordNotFoundError``.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, ClassVar, Generic, TypeVar

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.specials_api.core.errors import RecordNotFoundError
from src.specials_api.entities._base import Entity, EntityTable, utc_now

EntityT = TypeVar("EntityT", bound=Entity)
TableT = TypeVar("TableT", bound=EntityTable)


class EntityRepository(Generic[EntityT, TableT]):
    """Data-access layer for one entity/table pair."""

    entity_type: ClassVar[type[Entity]]
    table_type: ClassVar[type[EntityTable]]
    entity_name: ClassVar[str]

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, row: TableT) -> EntityT:
        return self.entity_type.model_validate(row, from_attributes=True)

    @contextmanager
    def _write(self) -> Iterator[None]:
        """Commit on success; roll back and re-raise on any database error."""
        try:
            yield
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error(
                "{} write failed: {}: {}", self.entity_name, type(e).__name__, e
            )
            raise

    def list_all(self, *where: Any) -> list[EntityT]:
        """Return rows matching ``where``, newest first."""
        statement = select(self.table_type)
        for clause in where:
            statement = statement.where(clause)
        statement = statement.order_by(self.table_type.created_at.desc())
        rows = self._session.exec(statement).all()
        return [self._to_entity(row) for row in rows]

    def get(self, entity_id: str) -> EntityT | None:
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            return None
        return self._to_entity(row)

    def create(self, data: dict[str, Any]) -> EntityT:
        row = self.table_type(**data)
        with self._write():
            self._session.add(row)
        self._session.refresh(row)
        return self._to_entity(row)

    def update(self, entity_id: str, changes: dict[str, Any]) -> EntityT:
        """Apply ``changes`` to the row; raises ``RecordNotFoundError`` if missing."""
        row = self._require(entity_id)
        with self._write():
            for field_name, value in changes.items():
                setattr(row, field_name, value)
            row.updated_at = utc_now()
            self._session.add(row)
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, entity_id: str) -> EntityT:
        """Remove the row and return it; raises ``RecordNotFoundError`` if missing."""
        row = self._require(entity_id)
        deleted = self._to_entity(row)
        with self._write():
            self._session.delete(row)
        return deleted

    def _require(self, entity_id: str) -> TableT:
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            raise RecordNotFoundError(self.entity_name, entity_id)
        return row
