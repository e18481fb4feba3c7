"""Entity: Currency."""

import uuid

from pydantic import BaseModel, Field

from src.ichor.core.sdk.errors import NotFoundError, UniqueEntryError
from src.ichor.core.sdk.order import ASC, OrderBy
from src.ichor.entities._base import Entity, UTCDateTime

DOMAIN_NAME = "currency"

ORDER_BY_ID = "id"
ORDER_BY_CODE = "code"
ORDER_BY_NAME = "name"
ORDER_BY_SYMBOL = "symbol"
ORDER_BY_LOCALE = "locale"
ORDER_BY_DECIMAL_PLACES = "decimal_places"
ORDER_BY_IS_ACTIVE = "is_active"
ORDER_BY_SORT_ORDER = "sort_order"
ORDER_BY_CREATED_DATE = "created_date"
ORDER_BY_UPDATED_DATE = "updated_date"

DEFAULT_ORDER_BY = OrderBy.new(ORDER_BY_SORT_ORDER, ASC)


class CurrencyNotFoundError(NotFoundError):
    def __init__(self, message: str = "currency not found"):
        super().__init__(message)


class CurrencyUniqueError(UniqueEntryError):
    def __init__(self, message: str = "currency entry is not unique"):
        super().__init__(message)


class Currency(Entity):
    """A currency the business can price and settle in."""

    code: str = Field(description="ISO 4217 code")
    name: str
    symbol: str
    locale: str
    decimal_places: int
    is_active: bool
    sort_order: int
    created_by: uuid.UUID | None = None
    created_date: UTCDateTime
    updated_by: uuid.UUID | None = None
    updated_date: UTCDateTime


class NewCurrency(BaseModel):
    code: str
    name: str
    symbol: str
    locale: str
    decimal_places: int
    is_active: bool = True
    sort_order: int = 0
    created_by: uuid.UUID | None = None


class UpdateCurrency(BaseModel):
    code: str | None = None
    name: str | None = None
    symbol: str | None = None
    locale: str | None = None
    decimal_places: int | None = None
    is_active: bool | None = None
    sort_order: int | None = None
    updated_by: uuid.UUID | None = None


class CurrencyFilter(BaseModel):
    id: uuid.UUID | None = None
    code: str | None = None
    name: str | None = None
    is_active: bool | None = None
