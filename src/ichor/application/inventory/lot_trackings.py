"""Application layer: lot trackings."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from src.ichor.core.sdk.crudapp import CrudApp, QueryParams
from src.ichor.core.sdk.params import parse_datetime, parse_int, parse_uuid
from src.ichor.entities._base import UTCDateTime
from src.ichor.entities.inventory import lot_trackings as bus

ORDER_BY_FIELDS = {
    "id": bus.entity.ORDER_BY_ID,
    "supplier_product_id": bus.entity.ORDER_BY_SUPPLIER_PRODUCT_ID,
    "lot_number": bus.entity.ORDER_BY_LOT_NUMBER,
    "manufacture_date": bus.entity.ORDER_BY_MANUFACTURE_DATE,
    "expiration_date": bus.entity.ORDER_BY_EXPIRATION_DATE,
    "received_date": bus.entity.ORDER_BY_RECEIVED_DATE,
    "quantity": bus.entity.ORDER_BY_QUANTITY,
    "quality_status": bus.entity.ORDER_BY_QUALITY_STATUS,
    "created_date": bus.entity.ORDER_BY_CREATED_DATE,
    "updated_date": bus.entity.ORDER_BY_UPDATED_DATE,
}


class LotTrackings(BaseModel):
    id: uuid.UUID
    supplier_product_id: uuid.UUID
    lot_number: str
    manufacture_date: UTCDateTime
    expiration_date: UTCDateTime
    received_date: UTCDateTime
    quantity: int
    quality_status: str
    created_date: UTCDateTime
    updated_date: UTCDateTime


class NewLotTrackings(BaseModel):
    supplier_product_id: uuid.UUID
    lot_number: str = Field(min_length=1, max_length=100)
    manufacture_date: datetime
    expiration_date: datetime
    received_date: datetime
    quantity: int = Field(ge=0)
    quality_status: str = Field(min_length=1, max_length=50)


class UpdateLotTrackings(BaseModel):
    supplier_product_id: uuid.UUID | None = None
    lot_number: str | None = Field(default=None, min_length=1, max_length=100)
    manufacture_date: datetime | None = None
    expiration_date: datetime | None = None
    received_date: datetime | None = None
    quantity: int | None = Field(default=None, ge=0)
    quality_status: str | None = Field(default=None, min_length=1, max_length=50)


class LotTrackingsQueryParams(QueryParams):
    id: str | None = None
    supplier_product_id: str | None = None
    lot_number: str | None = None
    manufacture_date: str | None = None
    expiration_date: str | None = None
    received_date: str | None = None
    quantity: str | None = None
    quality_status: str | None = None
    expiry_before: str | None = None
    expiry_after: str | None = None


class LotTrackingsApp(CrudApp[LotTrackings, LotTrackingsQueryParams]):
    label = "lottrackings"
    app_model = LotTrackings
    new_model = bus.NewLotTrackings
    update_model = bus.UpdateLotTrackings
    order_by_fields = ORDER_BY_FIELDS
    default_order_by = bus.entity.DEFAULT_ORDER_BY

    def parse_filter(self, qp: LotTrackingsQueryParams) -> bus.LotTrackingsFilter:
        return bus.LotTrackingsFilter(
            id=parse_uuid("id", qp.id),
            supplier_product_id=parse_uuid("supplier_product_id", qp.supplier_product_id),
            lot_number=qp.lot_number or None,
            manufacture_date=parse_datetime("manufacture_date", qp.manufacture_date),
            expiration_date=parse_datetime("expiration_date", qp.expiration_date),
            received_date=parse_datetime("received_date", qp.received_date),
            quantity=parse_int("quantity", qp.quantity),
            quality_status=qp.quality_status or None,
            expiry_before=parse_datetime("expiry_before", qp.expiry_before),
            expiry_after=parse_datetime("expiry_after", qp.expiry_after),
        )
