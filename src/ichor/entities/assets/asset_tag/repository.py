from src.ichor.core.services.database.store import SqlStore
from src.ichor.entities.assets.asset_tag import entity as at
from src.ichor.entities.assets.asset_tag.entity import (
    AssetTag,
    AssetTagFilter,
    AssetTagForeignKeyError,
    AssetTagNotFoundError,
    AssetTagUniqueError,
)
from src.ichor.entities.assets.asset_tag.table import AssetTagTable


class AssetTagRepository(SqlStore[AssetTag, AssetTagFilter]):
    table = AssetTagTable
    entity = AssetTag
    not_found_error = AssetTagNotFoundError
    unique_error = AssetTagUniqueError
    foreign_key_error = AssetTagForeignKeyError
    default_order = at.DEFAULT_ORDER_BY
    order_columns = {
        at.ORDER_BY_ID: "id",
        at.ORDER_BY_VALID_ASSET_ID: "valid_asset_id",
        at.ORDER_BY_TAG_ID: "tag_id",
    }

    def _apply_filter(self, stmt, flt: AssetTagFilter):
        if flt.id is not None:
            stmt = stmt.where(AssetTagTable.id == flt.id)
        if flt.valid_asset_id is not None:
            stmt = stmt.where(AssetTagTable.valid_asset_id == flt.valid_asset_id)
        if flt.tag_id is not None:
            stmt = stmt.where(AssetTagTable.tag_id == flt.tag_id)
        return stmt
