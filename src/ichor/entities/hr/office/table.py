"""Office database table model."""

import uuid

from sqlmodel import Field

from src.ichor.entities._base import EntityTable


class OfficeTable(EntityTable, table=True):
    __tablename__ = "offices"

    name: str = Field(unique=True, index=True)
    street_id: uuid.UUID = Field(foreign_key="streets.id")
