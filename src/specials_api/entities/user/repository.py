"""User repository."""

from src.specials_api.entities._repository import EntityRepository

from .entity import User
from .table import UserTable


class UserRepository(EntityRepository[User, UserTable]):
    """Data-access layer for users."""

    entity_type = User
    table_type = UserTable
    entity_name = "User"
