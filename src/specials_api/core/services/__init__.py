from .database import DbManageService, DbSessionService
from .special_service import CreateSpecialDto, SpecialService, UpdateSpecialDto
from .user_service import CreateUserDto, UpdateUserDto, UserService

__all__ = [
    "CreateSpecialDto",
    "CreateUserDto",
    "DbManageService",
    "DbSessionService",
    "SpecialService",
    "UpdateSpecialDto",
    "UpdateUserDto",
    "UserService",
]
