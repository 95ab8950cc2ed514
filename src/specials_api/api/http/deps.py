"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.specials_api.api.http.app_data import ApplicationDependencies
from src.specials_api.core.services import DbSessionService, SpecialService, UserService
from src.specials_api.entities.special import SpecialRepository
from src.specials_api.entities.user import UserRepository


def get_database_service(request: Request) -> DbSessionService:
    """Get the shared database service."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a session for the duration of one request."""
    with database_service.get_session() as session:
        yield session


def get_user_service(session: Session = Depends(get_db_session)) -> UserService:
    return UserService(UserRepository(session))


def get_special_service(session: Session = Depends(get_db_session)) -> SpecialService:
    return SpecialService(SpecialRepository(session))
