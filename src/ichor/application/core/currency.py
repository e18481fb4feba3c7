"""Application layer: currencies."""

import uuid

from pydantic import BaseModel, Field

from src.ichor.core.sdk.crudapp import CrudApp, QueryParams
from src.ichor.core.sdk.params import parse_bool, parse_uuid
from src.ichor.entities.core import currency as bus
from src.ichor.entities._base import UTCDateTime

ORDER_BY_FIELDS = {
    "id": bus.entity.ORDER_BY_ID,
    "code": bus.entity.ORDER_BY_CODE,
    "name": bus.entity.ORDER_BY_NAME,
    "symbol": bus.entity.ORDER_BY_SYMBOL,
    "locale": bus.entity.ORDER_BY_LOCALE,
    "decimal_places": bus.entity.ORDER_BY_DECIMAL_PLACES,
    "is_active": bus.entity.ORDER_BY_IS_ACTIVE,
    "sort_order": bus.entity.ORDER_BY_SORT_ORDER,
    "created_date": bus.entity.ORDER_BY_CREATED_DATE,
    "updated_date": bus.entity.ORDER_BY_UPDATED_DATE,
}


class Currency(BaseModel):
    id: uuid.UUID
    code: str
    name: str
    symbol: str
    locale: str
    decimal_places: int
    is_active: bool
    sort_order: int
    created_by: uuid.UUID | None
    created_date: UTCDateTime
    updated_by: uuid.UUID | None
    updated_date: UTCDateTime


class NewCurrency(BaseModel):
    code: str = Field(min_length=3, max_length=3)
    name: str = Field(min_length=1, max_length=100)
    symbol: str = Field(min_length=1, max_length=10)
    locale: str = Field(min_length=2, max_length=10)
    decimal_places: int = Field(ge=0, le=8)
    is_active: bool = True
    sort_order: int = 0
    created_by: uuid.UUID | None = None


class UpdateCurrency(BaseModel):
    code: str | None = Field(default=None, min_length=3, max_length=3)
    name: str | None = Field(default=None, min_length=1, max_length=100)
    symbol: str | None = Field(default=None, min_length=1, max_length=10)
    locale: str | None = Field(default=None, min_length=2, max_length=10)
    decimal_places: int | None = Field(default=None, ge=0, le=8)
    is_active: bool | None = None
    sort_order: int | None = None
    updated_by: uuid.UUID | None = None


class CurrencyQueryParams(QueryParams):
    id: str | None = None
    code: str | None = None
    name: str | None = None
    is_active: str | None = None


def parse_filter(qp: CurrencyQueryParams) -> bus.CurrencyFilter:
    return bus.CurrencyFilter(
        id=parse_uuid("id", qp.id),
        code=qp.code or None,
        name=qp.name or None,
        is_active=parse_bool("is_active", qp.is_active),
    )


class CurrencyApp(CrudApp[Currency, CurrencyQueryParams]):
    label = "currency"
    app_model = Currency
    new_model = bus.NewCurrency
    update_model = bus.UpdateCurrency
    order_by_fields = ORDER_BY_FIELDS
    default_order_by = bus.entity.DEFAULT_ORDER_BY

    def parse_filter(self, qp: CurrencyQueryParams) -> bus.CurrencyFilter:
        return parse_filter(qp)
