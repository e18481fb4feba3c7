"""Application layer: asset tags."""

import uuid

from pydantic import BaseModel

from src.ichor.core.sdk.crudapp import CrudApp, QueryParams
from src.ichor.core.sdk.params import parse_uuid
from src.ichor.entities.assets import asset_tag as bus

ORDER_BY_FIELDS = {
    "id": bus.entity.ORDER_BY_ID,
    "valid_asset_id": bus.entity.ORDER_BY_VALID_ASSET_ID,
    "tag_id": bus.entity.ORDER_BY_TAG_ID,
}


class AssetTag(BaseModel):
    id: uuid.UUID
    valid_asset_id: uuid.UUID
    tag_id: uuid.UUID


class NewAssetTag(BaseModel):
    valid_asset_id: uuid.UUID
    tag_id: uuid.UUID


class UpdateAssetTag(BaseModel):
    valid_asset_id: uuid.UUID | None = None
    tag_id: uuid.UUID | None = None


class AssetTagQueryParams(QueryParams):
    id: str | None = None
    valid_asset_id: str | None = None
    tag_id: str | None = None


class AssetTagApp(CrudApp[AssetTag, AssetTagQueryParams]):
    label = "assettag"
    app_model = AssetTag
    new_model = bus.NewAssetTag
    update_model = bus.UpdateAssetTag
    order_by_fields = ORDER_BY_FIELDS
    default_order_by = bus.entity.DEFAULT_ORDER_BY

    def parse_filter(self, qp: AssetTagQueryParams) -> bus.AssetTagFilter:
        return bus.AssetTagFilter(
            id=parse_uuid("id", qp.id),
            valid_asset_id=parse_uuid("valid_asset_id", qp.valid_asset_id),
            tag_id=parse_uuid("tag_id", qp.tag_id),
        )
