"""Entity: Region (state, province) within a country."""

import uuid

from pydantic import BaseModel

from src.ichor.core.sdk.errors import (
    ForeignKeyViolationError,
    NotFoundError,
    UniqueEntryError,
)
from src.ichor.core.sdk.order import ASC, OrderBy
from src.ichor.entities._base import Entity

DOMAIN_NAME = "region"

ORDER_BY_ID = "id"
ORDER_BY_COUNTRY_ID = "country_id"
ORDER_BY_NAME = "name"
ORDER_BY_CODE = "code"

DEFAULT_ORDER_BY = OrderBy.new(ORDER_BY_NAME, ASC)


class RegionNotFoundError(NotFoundError):
    def __init__(self, message: str = "region not found"):
        super().__init__(message)


class RegionUniqueError(UniqueEntryError):
    def __init__(self, message: str = "region entry is not unique"):
        super().__init__(message)


class RegionForeignKeyError(ForeignKeyViolationError):
    def __init__(self, message: str = "country does not exist"):
        super().__init__(message)


class Region(Entity):
    country_id: uuid.UUID
    name: str
    code: str


class NewRegion(BaseModel):
    country_id: uuid.UUID
    name: str
    code: str


class UpdateRegion(BaseModel):
    country_id: uuid.UUID | None = None
    name: str | None = None
    code: str | None = None


class RegionFilter(BaseModel):
    id: uuid.UUID | None = None
    country_id: uuid.UUID | None = None
    name: str | None = None
    code: str | None = None
