"""City database table model."""

import uuid

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from src.ichor.entities._base import EntityTable


class CityTable(EntityTable, table=True):
    __tablename__ = "cities"
    __table_args__ = (UniqueConstraint("region_id", "name"),)

    region_id: uuid.UUID = Field(foreign_key="regions.id", index=True)
    name: str
