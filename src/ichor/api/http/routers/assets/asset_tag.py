"""Asset tag endpoints."""

from src.ichor.api.http.routers.crud import crud_router
from src.ichor.application.assets import asset_tag as assettagapp
from src.ichor.entities.assets.asset_tag import AssetTagService

router = crud_router(
    app_cls=assettagapp.AssetTagApp,
    service_cls=AssetTagService,
    table="assets.asset_tags",
    model=assettagapp.AssetTag,
    new_model=assettagapp.NewAssetTag,
    update_model=assettagapp.UpdateAssetTag,
    query_model=assettagapp.AssetTagQueryParams,
)
