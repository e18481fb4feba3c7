"""Entity package: Region."""

from .entity import (
    DOMAIN_NAME,
    NewRegion,
    Region,
    RegionFilter,
    RegionForeignKeyError,
    RegionNotFoundError,
    RegionUniqueError,
    UpdateRegion,
)
from .repository import RegionRepository
from .service import RegionService
from .table import RegionTable

__all__ = [
    "DOMAIN_NAME",
    "NewRegion",
    "Region",
    "RegionFilter",
    "RegionForeignKeyError",
    "RegionNotFoundError",
    "RegionRepository",
    "RegionService",
    "RegionTable",
    "RegionUniqueError",
    "UpdateRegion",
]
