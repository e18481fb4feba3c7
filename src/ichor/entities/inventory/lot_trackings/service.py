from src.ichor.core.sdk.crud import CrudService
from src.ichor.entities.inventory.lot_trackings.entity import (
    DOMAIN_NAME,
    LotTrackings,
    LotTrackingsFilter,
    NewLotTrackings,
    UpdateLotTrackings,
)


class LotTrackingsService(
    CrudService[LotTrackings, NewLotTrackings, UpdateLotTrackings, LotTrackingsFilter]
):
    domain = DOMAIN_NAME
    entity = LotTrackings
