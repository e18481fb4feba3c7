"""Country database table model."""

from sqlmodel import Field

from src.ichor.entities._base import EntityTable


class CountryTable(EntityTable, table=True):
    __tablename__ = "countries"

    number: int = Field(unique=True)
    name: str = Field(index=True)
    alpha_2: str = Field(max_length=2, unique=True)
    alpha_3: str = Field(max_length=3, unique=True)
