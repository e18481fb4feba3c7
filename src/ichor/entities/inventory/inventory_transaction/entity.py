"""Entity: InventoryTransaction, one stock movement at a location."""

import uuid
from datetime import datetime

from pydantic import BaseModel

from src.ichor.core.sdk.errors import NotFoundError
from src.ichor.core.sdk.order import DESC, OrderBy
from src.ichor.entities._base import Entity, UTCDateTime

DOMAIN_NAME = "inventorytransaction"

ORDER_BY_ID = "id"
ORDER_BY_PRODUCT_ID = "product_id"
ORDER_BY_LOCATION_ID = "location_id"
ORDER_BY_USER_ID = "user_id"
ORDER_BY_QUANTITY = "quantity"
ORDER_BY_TRANSACTION_TYPE = "transaction_type"
ORDER_BY_REFERENCE_NUMBER = "reference_number"
ORDER_BY_TRANSACTION_DATE = "transaction_date"
ORDER_BY_CREATED_DATE = "created_date"
ORDER_BY_UPDATED_DATE = "updated_date"

DEFAULT_ORDER_BY = OrderBy.new(ORDER_BY_TRANSACTION_DATE, DESC)


class InventoryTransactionNotFoundError(NotFoundError):
    def __init__(self, message: str = "inventory transaction not found"):
        super().__init__(message)


class InventoryTransaction(Entity):
    product_id: uuid.UUID
    location_id: uuid.UUID
    user_id: uuid.UUID
    quantity: int
    transaction_type: str
    reference_number: str
    transaction_date: UTCDateTime
    created_date: UTCDateTime
    updated_date: UTCDateTime


class NewInventoryTransaction(BaseModel):
    product_id: uuid.UUID
    location_id: uuid.UUID
    user_id: uuid.UUID
    quantity: int
    transaction_type: str
    reference_number: str
    transaction_date: datetime


class UpdateInventoryTransaction(BaseModel):
    product_id: uuid.UUID | None = None
    location_id: uuid.UUID | None = None
    user_id: uuid.UUID | None = None
    quantity: int | None = None
    transaction_type: str | None = None
    reference_number: str | None = None
    transaction_date: datetime | None = None


class InventoryTransactionFilter(BaseModel):
    id: uuid.UUID | None = None
    product_id: uuid.UUID | None = None
    location_id: uuid.UUID | None = None
    user_id: uuid.UUID | None = None
    quantity: int | None = None
    transaction_type: str | None = None
    reference_number: str | None = None
    transaction_date: datetime | None = None
    start_transaction_date: datetime | None = None
    end_transaction_date: datetime | None = None
