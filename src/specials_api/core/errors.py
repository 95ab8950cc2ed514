"""Exceptions raised by the data and service layers."""


class EntityStoreError(Exception):
    """Base class for failures reported by the entity store."""


class RecordNotFoundError(EntityStoreError):
    """The row targeted by an update or delete does not exist."""

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id!r} not found")


class InvalidPriceError(ValueError):
    """A price value could not be parsed into a finite number."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid price: {value!r}")
