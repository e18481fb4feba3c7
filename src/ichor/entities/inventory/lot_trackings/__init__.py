"""Entity package: LotTrackings."""

from .entity import (
    DOMAIN_NAME,
    LotTrackings,
    LotTrackingsFilter,
    LotTrackingsForeignKeyError,
    LotTrackingsNotFoundError,
    LotTrackingsUniqueError,
    NewLotTrackings,
    UpdateLotTrackings,
)
from .repository import LotTrackingsRepository
from .service import LotTrackingsService
from .table import LotTrackingsTable

__all__ = [
    "DOMAIN_NAME",
    "LotTrackings",
    "LotTrackingsFilter",
    "LotTrackingsForeignKeyError",
    "LotTrackingsNotFoundError",
    "LotTrackingsRepository",
    "LotTrackingsService",
    "LotTrackingsTable",
    "LotTrackingsUniqueError",
    "NewLotTrackings",
    "UpdateLotTrackings",
]
