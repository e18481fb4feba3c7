"""Application layer: suppliers."""

import uuid
from decimal import Decimal

from pydantic import BaseModel, Field

from src.ichor.core.sdk.crudapp import CrudApp, QueryParams
from src.ichor.core.sdk.params import parse_bool, parse_decimal, parse_int, parse_uuid
from src.ichor.entities._base import UTCDateTime
from src.ichor.entities.procurement import supplier as bus

ORDER_BY_FIELDS = {
    "id": bus.entity.ORDER_BY_ID,
    "contact_infos_id": bus.entity.ORDER_BY_CONTACT_INFOS_ID,
    "name": bus.entity.ORDER_BY_NAME,
    "payment_term_id": bus.entity.ORDER_BY_PAYMENT_TERM_ID,
    "lead_time_days": bus.entity.ORDER_BY_LEAD_TIME_DAYS,
    "rating": bus.entity.ORDER_BY_RATING,
    "is_active": bus.entity.ORDER_BY_IS_ACTIVE,
    "created_date": bus.entity.ORDER_BY_CREATED_DATE,
    "updated_date": bus.entity.ORDER_BY_UPDATED_DATE,
}


class Supplier(BaseModel):
    id: uuid.UUID
    contact_infos_id: uuid.UUID
    name: str
    payment_term_id: uuid.UUID | None
    lead_time_days: int
    rating: Decimal
    is_active: bool
    created_date: UTCDateTime
    updated_date: UTCDateTime


class NewSupplier(BaseModel):
    contact_infos_id: uuid.UUID
    name: str = Field(min_length=1, max_length=100)
    payment_term_id: uuid.UUID | None = None
    lead_time_days: int = Field(ge=0)
    rating: Decimal = Field(ge=0, le=5, decimal_places=2)
    is_active: bool = True


class UpdateSupplier(BaseModel):
    contact_infos_id: uuid.UUID | None = None
    name: str | None = Field(default=None, min_length=1, max_length=100)
    payment_term_id: uuid.UUID | None = None
    lead_time_days: int | None = Field(default=None, ge=0)
    rating: Decimal | None = Field(default=None, ge=0, le=5, decimal_places=2)
    is_active: bool | None = None


class SupplierQueryParams(QueryParams):
    id: str | None = None
    contact_infos_id: str | None = None
    name: str | None = None
    payment_term_id: str | None = None
    lead_time_days: str | None = None
    rating: str | None = None
    is_active: str | None = None


class SupplierApp(CrudApp[Supplier, SupplierQueryParams]):
    label = "supplier"
    app_model = Supplier
    new_model = bus.NewSupplier
    update_model = bus.UpdateSupplier
    order_by_fields = ORDER_BY_FIELDS
    default_order_by = bus.entity.DEFAULT_ORDER_BY

    def parse_filter(self, qp: SupplierQueryParams) -> bus.SupplierFilter:
        return bus.SupplierFilter(
            id=parse_uuid("id", qp.id),
            contact_infos_id=parse_uuid("contact_infos_id", qp.contact_infos_id),
            name=qp.name or None,
            payment_term_id=parse_uuid("payment_term_id", qp.payment_term_id),
            lead_time_days=parse_int("lead_time_days", qp.lead_time_days),
            rating=parse_decimal("rating", qp.rating),
            is_active=parse_bool("is_active", qp.is_active),
        )
