"""Tag database table model."""

from sqlmodel import Field

from src.ichor.entities._base import EntityTable


class TagTable(EntityTable, table=True):
    __tablename__ = "tags"

    name: str = Field(unique=True, index=True)
    description: str = ""
