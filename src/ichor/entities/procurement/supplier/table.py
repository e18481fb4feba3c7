"""Supplier database table model."""

import uuid
from datetime import datetime
from decimal import Decimal

from sqlmodel import Field

from src.ichor.entities._base import EntityTable, timestamp_field


class SupplierTable(EntityTable, table=True):
    __tablename__ = "suppliers"

    contact_infos_id: uuid.UUID
    name: str = Field(unique=True, index=True)
    payment_term_id: uuid.UUID | None = None
    lead_time_days: int
    rating: Decimal = Field(max_digits=3, decimal_places=2)
    is_active: bool = True
    created_date: datetime = timestamp_field()
    updated_date: datetime = timestamp_field()
