"""Application layer: inventory transactions."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from src.ichor.core.sdk.crudapp import CrudApp, QueryParams
from src.ichor.core.sdk.params import parse_datetime, parse_int, parse_uuid
from src.ichor.entities._base import UTCDateTime
from src.ichor.entities.inventory import inventory_transaction as bus

ORDER_BY_FIELDS = {
    "id": bus.entity.ORDER_BY_ID,
    "product_id": bus.entity.ORDER_BY_PRODUCT_ID,
    "location_id": bus.entity.ORDER_BY_LOCATION_ID,
    "user_id": bus.entity.ORDER_BY_USER_ID,
    "quantity": bus.entity.ORDER_BY_QUANTITY,
    "transaction_type": bus.entity.ORDER_BY_TRANSACTION_TYPE,
    "reference_number": bus.entity.ORDER_BY_REFERENCE_NUMBER,
    "transaction_date": bus.entity.ORDER_BY_TRANSACTION_DATE,
    "created_date": bus.entity.ORDER_BY_CREATED_DATE,
    "updated_date": bus.entity.ORDER_BY_UPDATED_DATE,
}


class InventoryTransaction(BaseModel):
    id: uuid.UUID
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
    transaction_type: str = Field(min_length=1, max_length=50)
    reference_number: str = Field(min_length=1, max_length=100)
    transaction_date: datetime


class UpdateInventoryTransaction(BaseModel):
    product_id: uuid.UUID | None = None
    location_id: uuid.UUID | None = None
    user_id: uuid.UUID | None = None
    quantity: int | None = None
    transaction_type: str | None = Field(default=None, min_length=1, max_length=50)
    reference_number: str | None = Field(default=None, min_length=1, max_length=100)
    transaction_date: datetime | None = None


class InventoryTransactionQueryParams(QueryParams):
    id: str | None = None
    product_id: str | None = None
    location_id: str | None = None
    user_id: str | None = None
    quantity: str | None = None
    transaction_type: str | None = None
    reference_number: str | None = None
    transaction_date: str | None = None
    start_transaction_date: str | None = None
    end_transaction_date: str | None = None


class InventoryTransactionApp(
    CrudApp[InventoryTransaction, InventoryTransactionQueryParams]
):
    label = "inventorytransaction"
    app_model = InventoryTransaction
    new_model = bus.NewInventoryTransaction
    update_model = bus.UpdateInventoryTransaction
    order_by_fields = ORDER_BY_FIELDS
    default_order_by = bus.entity.DEFAULT_ORDER_BY

    def parse_filter(
        self, qp: InventoryTransactionQueryParams
    ) -> bus.InventoryTransactionFilter:
        return bus.InventoryTransactionFilter(
            id=parse_uuid("id", qp.id),
            product_id=parse_uuid("product_id", qp.product_id),
            location_id=parse_uuid("location_id", qp.location_id),
            user_id=parse_uuid("user_id", qp.user_id),
            quantity=parse_int("quantity", qp.quantity),
            transaction_type=qp.transaction_type or None,
            reference_number=qp.reference_number or None,
            transaction_date=parse_datetime("transaction_date", qp.transaction_date),
            start_transaction_date=parse_datetime(
                "start_transaction_date", qp.start_transaction_date
            ),
            end_transaction_date=parse_datetime(
                "end_transaction_date", qp.end_transaction_date
            ),
        )
