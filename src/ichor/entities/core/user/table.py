"""User database table model."""

import uuid
from datetime import date, datetime

import sqlalchemy as sa
from sqlmodel import Field

from src.ichor.entities._base import EntityTable, timestamp_field


class UserTable(EntityTable, table=True):
    __tablename__ = "users"

    username: str = Field(unique=True, index=True)
    first_name: str
    last_name: str
    email: str = Field(unique=True, index=True)
    roles: list[str] = Field(default_factory=list, sa_type=sa.JSON)
    password_hash: str
    enabled: bool = True
    office_id: uuid.UUID | None = Field(default=None, foreign_key="offices.id")
    birthday: date | None = None
    date_hired: date | None = None
    created_date: datetime = timestamp_field()
    updated_date: datetime = timestamp_field()
