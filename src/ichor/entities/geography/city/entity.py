"""Entity: City."""

import uuid

from pydantic import BaseModel

from src.ichor.core.sdk.errors import (
    ForeignKeyViolationError,
    NotFoundError,
    UniqueEntryError,
)
from src.ichor.core.sdk.order import ASC, OrderBy
from src.ichor.entities._base import Entity

DOMAIN_NAME = "city"

ORDER_BY_ID = "id"
ORDER_BY_REGION_ID = "region_id"
ORDER_BY_NAME = "name"

DEFAULT_ORDER_BY = OrderBy.new(ORDER_BY_NAME, ASC)


class CityNotFoundError(NotFoundError):
    def __init__(self, message: str = "city not found"):
        super().__init__(message)


class CityUniqueError(UniqueEntryError):
    def __init__(self, message: str = "city entry is not unique"):
        super().__init__(message)


class CityForeignKeyError(ForeignKeyViolationError):
    def __init__(self, message: str = "region does not exist"):
        super().__init__(message)


class City(Entity):
    region_id: uuid.UUID
    name: str


class NewCity(BaseModel):
    region_id: uuid.UUID
    name: str


class UpdateCity(BaseModel):
    region_id: uuid.UUID | None = None
    name: str | None = None


class CityFilter(BaseModel):
    id: uuid.UUID | None = None
    region_id: uuid.UUID | None = None
    name: str | None = None
