from src.ichor.core.sdk.crud import CrudService
from src.ichor.entities.geography.region.entity import (
    DOMAIN_NAME,
    NewRegion,
    Region,
    RegionFilter,
    UpdateRegion,
)


class RegionService(CrudService[Region, NewRegion, UpdateRegion, RegionFilter]):
    domain = DOMAIN_NAME
    entity = Region
