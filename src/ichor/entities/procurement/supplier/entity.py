"""Entity: Supplier."""

import uuid
from decimal import Decimal

from pydantic import BaseModel

from src.ichor.core.sdk.errors import NotFoundError, UniqueEntryError
from src.ichor.core.sdk.order import ASC, OrderBy
from src.ichor.entities._base import Entity, UTCDateTime

DOMAIN_NAME = "supplier"

ORDER_BY_ID = "id"
ORDER_BY_CONTACT_INFOS_ID = "contact_infos_id"
ORDER_BY_NAME = "name"
ORDER_BY_PAYMENT_TERM_ID = "payment_term_id"
ORDER_BY_LEAD_TIME_DAYS = "lead_time_days"
ORDER_BY_RATING = "rating"
ORDER_BY_IS_ACTIVE = "is_active"
ORDER_BY_CREATED_DATE = "created_date"
ORDER_BY_UPDATED_DATE = "updated_date"

DEFAULT_ORDER_BY = OrderBy.new(ORDER_BY_NAME, ASC)


class SupplierNotFoundError(NotFoundError):
    def __init__(self, message: str = "supplier not found"):
        super().__init__(message)


class SupplierUniqueError(UniqueEntryError):
    def __init__(self, message: str = "supplier entry is not unique"):
        super().__init__(message)


class Supplier(Entity):
    contact_infos_id: uuid.UUID
    name: str
    payment_term_id: uuid.UUID | None = None
    lead_time_days: int
    rating: Decimal
    is_active: bool
    created_date: UTCDateTime
    updated_date: UTCDateTime


class NewSupplier(BaseModel):
    contact_infos_id: uuid.UUID
    name: str
    payment_term_id: uuid.UUID | None = None
    lead_time_days: int
    rating: Decimal
    is_active: bool = True


class UpdateSupplier(BaseModel):
    contact_infos_id: uuid.UUID | None = None
    name: str | None = None
    payment_term_id: uuid.UUID | None = None
    lead_time_days: int | None = None
    rating: Decimal | None = None
    is_active: bool | None = None


class SupplierFilter(BaseModel):
    id: uuid.UUID | None = None
    contact_infos_id: uuid.UUID | None = None
    name: str | None = None
    payment_term_id: uuid.UUID | None = None
    lead_time_days: int | None = None
    rating: Decimal | None = None
    is_active: bool | None = None
