"""Lot tracking endpoints."""

from src.ichor.api.http.routers.crud import crud_router
from src.ichor.application.inventory import lot_trackings as lotapp
from src.ichor.entities.inventory.lot_trackings import LotTrackingsService

router = crud_router(
    app_cls=lotapp.LotTrackingsApp,
    service_cls=LotTrackingsService,
    table="inventory.lot_trackings",
    model=lotapp.LotTrackings,
    new_model=lotapp.NewLotTrackings,
    update_model=lotapp.UpdateLotTrackings,
    query_model=lotapp.LotTrackingsQueryParams,
)
