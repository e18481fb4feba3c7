"""Entity: AssetTag, the link between a valid asset and a tag."""

import uuid

from pydantic import BaseModel

from src.ichor.core.sdk.errors import (
    ForeignKeyViolationError,
    NotFoundError,
    UniqueEntryError,
)
from src.ichor.core.sdk.order import ASC, OrderBy
from src.ichor.entities._base import Entity

DOMAIN_NAME = "assettag"

ORDER_BY_ID = "id"
ORDER_BY_VALID_ASSET_ID = "valid_asset_id"
ORDER_BY_TAG_ID = "tag_id"

DEFAULT_ORDER_BY = OrderBy.new(ORDER_BY_VALID_ASSET_ID, ASC)


class AssetTagNotFoundError(NotFoundError):
    def __init__(self, message: str = "asset tag not found"):
        super().__init__(message)


class AssetTagUniqueError(UniqueEntryError):
    def __init__(self, message: str = "asset tag entry is not unique"):
        super().__init__(message)


class AssetTagForeignKeyError(ForeignKeyViolationError):
    def __init__(self, message: str = "tag does not exist"):
        super().__init__(message)


class AssetTag(Entity):
    valid_asset_id: uuid.UUID
    tag_id: uuid.UUID


class NewAssetTag(BaseModel):
    valid_asset_id: uuid.UUID
    tag_id: uuid.UUID


class UpdateAssetTag(BaseModel):
    valid_asset_id: uuid.UUID | None = None
    tag_id: uuid.UUID | None = None


class AssetTagFilter(BaseModel):
    id: uuid.UUID | None = None
    valid_asset_id: uuid.UUID | None = None
    tag_id: uuid.UUID | None = None
