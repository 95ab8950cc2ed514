"""User API router with CRUD operations."""

from fastapi import APIRouter, Depends, status
from loguru import logger
from starlette.responses import JSONResponse

from src.specials_api.api.http.deps import get_user_service
from src.specials_api.api.http.errors import error_response
from src.specials_api.core.services import CreateUserDto, UpdateUserDto, UserService
from src.specials_api.entities._base import CamelModel
from src.specials_api.entities.user import User

router = APIRouter(prefix="/users", tags=["users"])

USER_NOT_FOUND = "User not found"
EMAIL_NOT_NULLABLE = "Email cannot be null"


class UserPayload(CamelModel):
    """Request body for create and update; every field may be omitted."""

    email: str | None = None
    name: str | None = None


@router.get("", response_model=list[User])
def list_users(
    service: UserService = Depends(get_user_service),
) -> list[User] | JSONResponse:
    """List all users, newest first."""
    try:
        return service.get_all_users()
    except Exception:
        logger.exception("Failed to fetch users")
        return error_response(500, "Failed to fetch users")


@router.get("/{user_id}", response_model=User)
def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> User | JSONResponse:
    """Get a user by ID."""
    try:
        user = service.get_user_by_id(user_id)
    except Exception:
        logger.exception("Failed to fetch user {}", user_id)
        return error_response(500, "Failed to fetch user")

    if user is None:
        return error_response(404, USER_NOT_FOUND)
    return user


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserPayload | None = None,
    service: UserService = Depends(get_user_service),
) -> User | JSONResponse:
    """Create a new user. ``email`` is required."""
    payload = payload or UserPayload()
    if not payload.email:
        return error_response(400, "Email is required")

    try:
        return service.create_user(CreateUserDto(email=payload.email, name=payload.name))
    except Exception:
        logger.exception("Failed to create user")
        return error_response(500, "Failed to create user")


@router.put("/{user_id}", response_model=User)
def update_user(
    user_id: str,
    payload: UserPayload | None = None,
    service: UserService = Depends(get_user_service),
) -> User | JSONResponse:
    """Update the fields present in the body."""
    payload = payload or UserPayload()
    changes = payload.model_dump(exclude_unset=True)
    if "email" in changes and changes["email"] is None:
        return error_response(400, EMAIL_NOT_NULLABLE)

    try:
        user = service.update_user(user_id, UpdateUserDto(**changes))
    except Exception:
        logger.exception("Failed to update user {}", user_id)
        return error_response(500, "Failed to update user")

    if user is None:
        return error_response(404, USER_NOT_FOUND)
    return user


@router.delete("/{user_id}", response_model=None)
def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> dict[str, str] | JSONResponse:
    """Delete a user."""
    try:
        user = service.delete_user(user_id)
    except Exception:
        logger.exception("Failed to delete user {}", user_id)
        return error_response(500, "Failed to delete user")

    if user is None:
        return error_response(404, USER_NOT_FOUND)
    return {"message": "User deleted successfully"}
