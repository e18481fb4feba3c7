"""LotTrackings database table model."""

import uuid
from datetime import datetime

import sqlalchemy as sa
from sqlmodel import Field

from src.ichor.entities._base import EntityTable, timestamp_field


def _date_column() -> datetime:
    return Field(sa_type=sa.DateTime(timezone=True), nullable=False)


class LotTrackingsTable(EntityTable, table=True):
    __tablename__ = "lot_trackings"

    supplier_product_id: uuid.UUID = Field(
        foreign_key="supplier_products.id", index=True
    )
    lot_number: str = Field(unique=True, index=True)
    manufacture_date: datetime = _date_column()
    expiration_date: datetime = _date_column()
    received_date: datetime = _date_column()
    quantity: int
    quality_status: str
    created_date: datetime = timestamp_field()
    updated_date: datetime = timestamp_field()
