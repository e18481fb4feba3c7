"""AssetTag database table model."""

import uuid

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from src.ichor.entities._base import EntityTable


class AssetTagTable(EntityTable, table=True):
    __tablename__ = "asset_tags"
    __table_args__ = (UniqueConstraint("valid_asset_id", "tag_id"),)

    valid_asset_id: uuid.UUID = Field(index=True)
    tag_id: uuid.UUID = Field(foreign_key="tags.id", index=True)
