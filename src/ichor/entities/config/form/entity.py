"""Entity: Form."""

import uuid

from pydantic import BaseModel

from src.ichor.core.sdk.errors import NotFoundError, UniqueEntryError
from src.ichor.core.sdk.order import ASC, OrderBy
from src.ichor.entities._base import Entity

DOMAIN_NAME = "form"

ORDER_BY_ID = "id"
ORDER_BY_NAME = "name"
ORDER_BY_IS_REFERENCE_DATA = "is_reference_data"

DEFAULT_ORDER_BY = OrderBy.new(ORDER_BY_NAME, ASC)


class FormNotFoundError(NotFoundError):
    def __init__(self, message: str = "form not found"):
        super().__init__(message)


class FormUniqueError(UniqueEntryError):
    def __init__(self, message: str = "form entry is not unique"):
        super().__init__(message)


class Form(Entity):
    name: str
    is_reference_data: bool = False
    allow_inline_create: bool = False


class NewForm(BaseModel):
    name: str
    is_reference_data: bool = False
    allow_inline_create: bool = False


class UpdateForm(BaseModel):
    name: str | None = None
    is_reference_data: bool | None = None
    allow_inline_create: bool | None = None


class FormFilter(BaseModel):
    id: uuid.UUID | None = None
    name: str | None = None
    is_reference_data: bool | None = None
