from src.ichor.core.sdk.crud import CrudService
from src.ichor.entities.assets.asset_tag.entity import (
    DOMAIN_NAME,
    AssetTag,
    AssetTagFilter,
    NewAssetTag,
    UpdateAssetTag,
)


class AssetTagService(CrudService[AssetTag, NewAssetTag, UpdateAssetTag, AssetTagFilter]):
    domain = DOMAIN_NAME
    entity = AssetTag
