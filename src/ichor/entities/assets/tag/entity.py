"""Entity: Tag."""

import uuid

from pydantic import BaseModel

from src.ichor.core.sdk.errors import NotFoundError, UniqueEntryError
from src.ichor.core.sdk.order import ASC, OrderBy
from src.ichor.entities._base import Entity

DOMAIN_NAME = "tag"

ORDER_BY_ID = "id"
ORDER_BY_NAME = "name"
ORDER_BY_DESCRIPTION = "description"

DEFAULT_ORDER_BY = OrderBy.new(ORDER_BY_NAME, ASC)


class TagNotFoundError(NotFoundError):
    def __init__(self, message: str = "tag not found"):
        super().__init__(message)


class TagUniqueError(UniqueEntryError):
    def __init__(self, message: str = "tag entry is not unique"):
        super().__init__(message)


class Tag(Entity):
    name: str
    description: str = ""


class NewTag(BaseModel):
    name: str
    description: str = ""


class UpdateTag(BaseModel):
    name: str | None = None
    description: str | None = None


class TagFilter(BaseModel):
    id: uuid.UUID | None = None
    name: str | None = None
    description: str | None = None
