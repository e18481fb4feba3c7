"""Entity: Street address."""

import uuid

from pydantic import BaseModel

from src.ichor.core.sdk.errors import ForeignKeyViolationError, NotFoundError
from src.ichor.core.sdk.order import ASC, OrderBy
from src.ichor.entities._base import Entity

DOMAIN_NAME = "street"

ORDER_BY_ID = "id"
ORDER_BY_CITY_ID = "city_id"
ORDER_BY_LINE_1 = "line_1"
ORDER_BY_LINE_2 = "line_2"
ORDER_BY_POSTAL_CODE = "postal_code"

DEFAULT_ORDER_BY = OrderBy.new(ORDER_BY_LINE_1, ASC)


class StreetNotFoundError(NotFoundError):
    def __init__(self, message: str = "street not found"):
        super().__init__(message)


class StreetForeignKeyError(ForeignKeyViolationError):
    def __init__(self, message: str = "city does not exist"):
        super().__init__(message)


class Street(Entity):
    city_id: uuid.UUID
    line_1: str
    line_2: str = ""
    postal_code: str


class NewStreet(BaseModel):
    city_id: uuid.UUID
    line_1: str
    line_2: str = ""
    postal_code: str


class UpdateStreet(BaseModel):
    city_id: uuid.UUID | None = None
    line_1: str | None = None
    line_2: str | None = None
    postal_code: str | None = None


class StreetFilter(BaseModel):
    id: uuid.UUID | None = None
    city_id: uuid.UUID | None = None
    line_1: str | None = None
    line_2: str | None = None
    postal_code: str | None = None
