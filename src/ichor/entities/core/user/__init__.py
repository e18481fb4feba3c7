"""Entity package: User."""

from .entity import (
    DOMAIN_NAME,
    NewUser,
    Role,
    UpdateUser,
    UpdateUserRole,
    User,
    UserFilter,
    UserNotFoundError,
    UserUniqueError,
)
from .repository import UserRepository
from .service import UserService
from .table import UserTable

__all__ = [
    "DOMAIN_NAME",
    "NewUser",
    "Role",
    "UpdateUser",
    "UpdateUserRole",
    "User",
    "UserFilter",
    "UserNotFoundError",
    "UserRepository",
    "UserService",
    "UserTable",
    "UserUniqueError",
]
