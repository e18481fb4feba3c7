from src.ichor.core.services.database.store import SqlStore, contains
from src.ichor.entities.geography.city import entity as cty
from src.ichor.entities.geography.city.entity import (
    City,
    CityFilter,
    CityForeignKeyError,
    CityNotFoundError,
    CityUniqueError,
)
from src.ichor.entities.geography.city.table import CityTable


class CityRepository(SqlStore[City, CityFilter]):
    table = CityTable
    entity = City
    not_found_error = CityNotFoundError
    unique_error = CityUniqueError
    foreign_key_error = CityForeignKeyError
    default_order = cty.DEFAULT_ORDER_BY
    order_columns = {
        cty.ORDER_BY_ID: "id",
        cty.ORDER_BY_REGION_ID: "region_id",
        cty.ORDER_BY_NAME: "name",
    }

    def _apply_filter(self, stmt, flt: CityFilter):
        if flt.id is not None:
            stmt = stmt.where(CityTable.id == flt.id)
        if flt.region_id is not None:
            stmt = stmt.where(CityTable.region_id == flt.region_id)
        if flt.name:
            stmt = stmt.where(contains(CityTable.name, flt.name))
        return stmt
