"""Entity package: AssetTag."""

from .entity import (
    DOMAIN_NAME,
    AssetTag,
    AssetTagFilter,
    AssetTagForeignKeyError,
    AssetTagNotFoundError,
    AssetTagUniqueError,
    NewAssetTag,
    UpdateAssetTag,
)
from .repository import AssetTagRepository
from .service import AssetTagService
from .table import AssetTagTable

__all__ = [
    "DOMAIN_NAME",
    "AssetTag",
    "AssetTagFilter",
    "AssetTagForeignKeyError",
    "AssetTagNotFoundError",
    "AssetTagRepository",
    "AssetTagService",
    "AssetTagTable",
    "AssetTagUniqueError",
    "NewAssetTag",
    "UpdateAssetTag",
]
