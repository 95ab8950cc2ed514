from dataclasses import dataclass

from src.specials_api.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
