"""Street database table model."""

import uuid

from sqlmodel import Field

from src.ichor.entities._base import EntityTable


class StreetTable(EntityTable, table=True):
    __tablename__ = "streets"

    city_id: uuid.UUID = Field(foreign_key="cities.id", index=True)
    line_1: str
    line_2: str = ""
    postal_code: str = Field(index=True)
