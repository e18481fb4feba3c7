"""Currency database table model."""

import uuid
from datetime import datetime

from sqlmodel import Field

from src.ichor.entities._base import EntityTable, timestamp_field


class CurrencyTable(EntityTable, table=True):
    __tablename__ = "currencies"

    code: str = Field(max_length=3, unique=True, index=True)
    name: str
    symbol: str
    locale: str
    decimal_places: int = Field(ge=0)
    is_active: bool = True
    sort_order: int = 0
    created_by: uuid.UUID | None = None
    created_date: datetime = timestamp_field()
    updated_by: uuid.UUID | None = None
    updated_date: datetime = timestamp_field()
