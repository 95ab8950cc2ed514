"""User service: the thin layer between the users controller and the store."""

from loguru import logger
from pydantic import BaseModel

from src.specials_api.core.errors import RecordNotFoundError
from src.specials_api.entities.user import User, UserRepository


class CreateUserDto(BaseModel):
    email: str
    name: str | None = None


class UpdateUserDto(BaseModel):
    """Partial user update; only explicitly set fields are applied."""

    email: str | None = None
    name: str | None = None

    def changes(self) -> dict[str, object]:
        return self.model_dump(exclude_unset=True)


class UserService:
    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def get_all_users(self) -> list[User]:
        return self._repository.list_all()

    def get_user_by_id(self, user_id: str) -> User | None:
        return self._repository.get(user_id)

    def create_user(self, data: CreateUserDto) -> User:
        user = self._repository.create(data.model_dump(exclude_none=True))
        logger.info("Created user {}", user.id)
        return user

    def update_user(self, user_id: str, data: UpdateUserDto) -> User | None:
        """Return the updated user, or None when no such user exists."""
        try:
            return self._repository.update(user_id, data.changes())
        except RecordNotFoundError:
            logger.debug("Update skipped, user {} not found", user_id)
            return None

    def delete_user(self, user_id: str) -> User | None:
        """Return the deleted user, or None when no such user exists."""
        try:
            user = self._repository.delete(user_id)
        except RecordNotFoundError:
            logger.debug("Delete skipped, user {} not found", user_id)
            return None
        logger.info("Deleted user {}", user_id)
        return user
