"""OrderLineItem database table model."""

import uuid
from datetime import datetime
from decimal import Decimal

from sqlmodel import Field

from src.ichor.entities._base import EntityTable, timestamp_field


class OrderLineItemTable(EntityTable, table=True):
    __tablename__ = "order_line_items"

    order_id: uuid.UUID = Field(index=True)
    product_id: uuid.UUID = Field(index=True)
    description: str = ""
    quantity: int
    unit_price: Decimal = Field(max_digits=12, decimal_places=2)
    discount: Decimal = Field(default=Decimal(0), max_digits=12, decimal_places=2)
    discount_type: str = "flat"
    line_total: Decimal = Field(max_digits=14, decimal_places=2)
    line_item_fulfillment_statuses_id: uuid.UUID
    created_by: uuid.UUID
    created_date: datetime = timestamp_field()
    updated_by: uuid.UUID
    updated_date: datetime = timestamp_field()
