"""Region database table model."""

import uuid

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from src.ichor.entities._base import EntityTable


class RegionTable(EntityTable, table=True):
    __tablename__ = "regions"
    __table_args__ = (UniqueConstraint("country_id", "code"),)

    country_id: uuid.UUID = Field(foreign_key="countries.id", index=True)
    name: str
    code: str
