from sqlalchemy import func

from src.ichor.core.services.database.store import SqlStore, contains
from src.ichor.entities.geography.country import entity as ctry
from src.ichor.entities.geography.country.entity import (
    Country,
    CountryFilter,
    CountryNotFoundError,
    CountryUniqueError,
)
from src.ichor.entities.geography.country.table import CountryTable


class CountryRepository(SqlStore[Country, CountryFilter]):
    table = CountryTable
    entity = Country
    not_found_error = CountryNotFoundError
    unique_error = CountryUniqueError
    default_order = ctry.DEFAULT_ORDER_BY
    order_columns = {
        ctry.ORDER_BY_ID: "id",
        ctry.ORDER_BY_NUMBER: "number",
        ctry.ORDER_BY_NAME: "name",
        ctry.ORDER_BY_ALPHA_2: "alpha_2",
        ctry.ORDER_BY_ALPHA_3: "alpha_3",
    }

    def _apply_filter(self, stmt, flt: CountryFilter):
        if flt.id is not None:
            stmt = stmt.where(CountryTable.id == flt.id)
        if flt.number is not None:
            stmt = stmt.where(CountryTable.number == flt.number)
        if flt.name:
            stmt = stmt.where(contains(CountryTable.name, flt.name))
        if flt.alpha_2:
            stmt = stmt.where(func.upper(CountryTable.alpha_2) == flt.alpha_2.upper())
        if flt.alpha_3:
            stmt = stmt.where(func.upper(CountryTable.alpha_3) == flt.alpha_3.upper())
        return stmt
