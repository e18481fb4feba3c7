"""InventoryTransaction database table model."""

import uuid
from datetime import datetime

import sqlalchemy as sa
from sqlmodel import Field

from src.ichor.entities._base import EntityTable, timestamp_field


class InventoryTransactionTable(EntityTable, table=True):
    __tablename__ = "inventory_transactions"

    product_id: uuid.UUID = Field(index=True)
    location_id: uuid.UUID = Field(index=True)
    user_id: uuid.UUID
    quantity: int
    transaction_type: str
    reference_number: str
    transaction_date: datetime = Field(
        sa_type=sa.DateTime(timezone=True), nullable=False, index=True
    )
    created_date: datetime = timestamp_field()
    updated_date: datetime = timestamp_field()
