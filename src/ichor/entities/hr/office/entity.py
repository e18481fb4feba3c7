"""Entity: Office."""

import uuid

from pydantic import BaseModel

from src.ichor.core.sdk.errors import (
    ForeignKeyViolationError,
    NotFoundError,
    UniqueEntryError,
)
from src.ichor.core.sdk.order import ASC, OrderBy
from src.ichor.entities._base import Entity

DOMAIN_NAME = "office"

ORDER_BY_ID = "id"
ORDER_BY_NAME = "name"
ORDER_BY_STREET_ID = "street_id"

DEFAULT_ORDER_BY = OrderBy.new(ORDER_BY_NAME, ASC)


class OfficeNotFoundError(NotFoundError):
    def __init__(self, message: str = "office not found"):
        super().__init__(message)


class OfficeUniqueError(UniqueEntryError):
    def __init__(self, message: str = "office entry is not unique"):
        super().__init__(message)


class OfficeForeignKeyError(ForeignKeyViolationError):
    def __init__(self, message: str = "street does not exist"):
        super().__init__(message)


class Office(Entity):
    name: str
    street_id: uuid.UUID


class NewOffice(BaseModel):
    name: str
    street_id: uuid.UUID


class UpdateOffice(BaseModel):
    name: str | None = None
    street_id: uuid.UUID | None = None


class OfficeFilter(BaseModel):
    id: uuid.UUID | None = None
    name: str | None = None
    street_id: uuid.UUID | None = None
