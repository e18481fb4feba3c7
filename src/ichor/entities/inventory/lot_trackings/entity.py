"""Entity: LotTrackings, a received lot of a supplier product."""

import uuid
from datetime import datetime

from pydantic import BaseModel

from src.ichor.core.sdk.errors import (
    ForeignKeyViolationError,
    NotFoundError,
    UniqueEntryError,
)
from src.ichor.core.sdk.order import ASC, OrderBy
from src.ichor.entities._base import Entity, UTCDateTime

DOMAIN_NAME = "lottrackings"

ORDER_BY_ID = "id"
ORDER_BY_SUPPLIER_PRODUCT_ID = "supplier_product_id"
ORDER_BY_LOT_NUMBER = "lot_number"
ORDER_BY_MANUFACTURE_DATE = "manufacture_date"
ORDER_BY_EXPIRATION_DATE = "expiration_date"
ORDER_BY_RECEIVED_DATE = "received_date"
ORDER_BY_QUANTITY = "quantity"
ORDER_BY_QUALITY_STATUS = "quality_status"
ORDER_BY_CREATED_DATE = "created_date"
ORDER_BY_UPDATED_DATE = "updated_date"

DEFAULT_ORDER_BY = OrderBy.new(ORDER_BY_EXPIRATION_DATE, ASC)


class LotTrackingsNotFoundError(NotFoundError):
    def __init__(self, message: str = "lot tracking not found"):
        super().__init__(message)


class LotTrackingsUniqueError(UniqueEntryError):
    def __init__(self, message: str = "lot tracking entry is not unique"):
        super().__init__(message)


class LotTrackingsForeignKeyError(ForeignKeyViolationError):
    def __init__(self, message: str = "supplier product does not exist"):
        super().__init__(message)


class LotTrackings(Entity):
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
    lot_number: str
    manufacture_date: datetime
    expiration_date: datetime
    received_date: datetime
    quantity: int
    quality_status: str


class UpdateLotTrackings(BaseModel):
    supplier_product_id: uuid.UUID | None = None
    lot_number: str | None = None
    manufacture_date: datetime | None = None
    expiration_date: datetime | None = None
    received_date: datetime | None = None
    quantity: int | None = None
    quality_status: str | None = None


class LotTrackingsFilter(BaseModel):
    id: uuid.UUID | None = None
    supplier_product_id: uuid.UUID | None = None
    lot_number: str | None = None
    manufacture_date: datetime | None = None
    expiration_date: datetime | None = None
    received_date: datetime | None = None
    quantity: int | None = None
    quality_status: str | None = None
    expiry_before: datetime | None = None
    expiry_after: datetime | None = None
