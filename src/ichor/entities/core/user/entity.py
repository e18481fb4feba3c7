"""Entity: User."""

import uuid
from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from src.ichor.core.sdk.errors import NotFoundError, UniqueEntryError
from src.ichor.core.sdk.order import ASC, OrderBy
from src.ichor.entities._base import Entity, UTCDateTime

DOMAIN_NAME = "user"

ORDER_BY_ID = "id"
ORDER_BY_USERNAME = "username"
ORDER_BY_FIRST_NAME = "first_name"
ORDER_BY_LAST_NAME = "last_name"
ORDER_BY_EMAIL = "email"
ORDER_BY_ENABLED = "enabled"
ORDER_BY_DATE_HIRED = "date_hired"
ORDER_BY_CREATED_DATE = "created_date"

DEFAULT_ORDER_BY = OrderBy.new(ORDER_BY_USERNAME, ASC)

Role = Literal["ADMIN", "USER"]


class UserNotFoundError(NotFoundError):
    def __init__(self, message: str = "user not found"):
        super().__init__(message)


class UserUniqueError(UniqueEntryError):
    def __init__(self, message: str = "user entry is not unique"):
        super().__init__(message)


class User(Entity):
    """A person who can sign in to the system."""

    username: str
    first_name: str
    last_name: str
    email: str
    roles: list[str] = Field(default_factory=list)
    password_hash: str = Field(default="", repr=False, exclude=True)
    enabled: bool = True
    office_id: uuid.UUID | None = None
    birthday: date | None = None
    date_hired: date | None = None
    created_date: UTCDateTime
    updated_date: UTCDateTime

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class NewUser(BaseModel):
    username: str
    first_name: str
    last_name: str
    email: str
    roles: list[Role]
    password: str = Field(repr=False)
    enabled: bool = True
    office_id: uuid.UUID | None = None
    birthday: date | None = None
    date_hired: date | None = None


class UpdateUser(BaseModel):
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = Field(default=None, repr=False)
    enabled: bool | None = None
    office_id: uuid.UUID | None = None
    birthday: date | None = None
    date_hired: date | None = None


class UpdateUserRole(BaseModel):
    """Replacement role set for a user."""

    roles: list[Role]


class UserFilter(BaseModel):
    id: uuid.UUID | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    enabled: bool | None = None
    office_id: uuid.UUID | None = None
    start_created_date: UTCDateTime | None = None
    end_created_date: UTCDateTime | None = None
