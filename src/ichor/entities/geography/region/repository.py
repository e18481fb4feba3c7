from src.ichor.core.services.database.store import SqlStore, contains
from src.ichor.entities.geography.region import entity as rgn
from src.ichor.entities.geography.region.entity import (
    Region,
    RegionFilter,
    RegionForeignKeyError,
    RegionNotFoundError,
    RegionUniqueError,
)
from src.ichor.entities.geography.region.table import RegionTable


class RegionRepository(SqlStore[Region, RegionFilter]):
    table = RegionTable
    entity = Region
    not_found_error = RegionNotFoundError
    unique_error = RegionUniqueError
    foreign_key_error = RegionForeignKeyError
    default_order = rgn.DEFAULT_ORDER_BY
    order_columns = {
        rgn.ORDER_BY_ID: "id",
        rgn.ORDER_BY_COUNTRY_ID: "country_id",
        rgn.ORDER_BY_NAME: "name",
        rgn.ORDER_BY_CODE: "code",
    }

    def _apply_filter(self, stmt, flt: RegionFilter):
        if flt.id is not None:
            stmt = stmt.where(RegionTable.id == flt.id)
        if flt.country_id is not None:
            stmt = stmt.where(RegionTable.country_id == flt.country_id)
        if flt.name:
            stmt = stmt.where(contains(RegionTable.name, flt.name))
        if flt.code:
            stmt = stmt.where(RegionTable.code == flt.code)
        return stmt
