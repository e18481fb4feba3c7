"""SupplierProduct database table model."""

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from src.ichor.entities._base import EntityTable, timestamp_field


class SupplierProductTable(EntityTable, table=True):
    __tablename__ = "supplier_products"
    __table_args__ = (UniqueConstraint("supplier_id", "product_id"),)

    supplier_id: uuid.UUID = Field(foreign_key="suppliers.id", index=True)
    product_id: uuid.UUID = Field(index=True)
    supplier_part_number: str
    min_order_quantity: int
    max_order_quantity: int
    lead_time_days: int
    unit_cost: Decimal = Field(max_digits=12, decimal_places=2)
    is_primary_supplier: bool = False
    created_date: datetime = timestamp_field()
    updated_date: datetime = timestamp_field()
