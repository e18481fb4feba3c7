"""Form database table model."""

from sqlmodel import Field

from src.ichor.entities._base import EntityTable


class FormTable(EntityTable, table=True):
    __tablename__ = "forms"

    name: str = Field(max_length=255, unique=True, index=True)
    is_reference_data: bool = False
    allow_inline_create: bool = False
