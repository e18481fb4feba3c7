from src.ichor.core.services.database.store import SqlStore, contains
from src.ichor.entities.core.currency import entity as cur
from src.ichor.entities.core.currency.entity import (
    Currency,
    CurrencyFilter,
    CurrencyNotFoundError,
    CurrencyUniqueError,
)
from src.ichor.entities.core.currency.table import CurrencyTable


class CurrencyRepository(SqlStore[Currency, CurrencyFilter]):
    """Data-access layer for currencies."""

    table = CurrencyTable
    entity = Currency
    not_found_error = CurrencyNotFoundError
    unique_error = CurrencyUniqueError
    default_order = cur.DEFAULT_ORDER_BY
    order_columns = {
        cur.ORDER_BY_ID: "id",
        cur.ORDER_BY_CODE: "code",
        cur.ORDER_BY_NAME: "name",
        cur.ORDER_BY_SYMBOL: "symbol",
        cur.ORDER_BY_LOCALE: "locale",
        cur.ORDER_BY_DECIMAL_PLACES: "decimal_places",
        cur.ORDER_BY_IS_ACTIVE: "is_active",
        cur.ORDER_BY_SORT_ORDER: "sort_order",
        cur.ORDER_BY_CREATED_DATE: "created_date",
        cur.ORDER_BY_UPDATED_DATE: "updated_date",
    }

    def _apply_filter(self, stmt, flt: CurrencyFilter):
        if flt.id is not None:
            stmt = stmt.where(CurrencyTable.id == flt.id)
        if flt.code:
            stmt = stmt.where(contains(CurrencyTable.code, flt.code))
        if flt.name:
            stmt = stmt.where(contains(CurrencyTable.name, flt.name))
        if flt.is_active is not None:
            stmt = stmt.where(CurrencyTable.is_active == flt.is_active)
        return stmt

    def query_by_code(self, code: str) -> Currency:
        return self._query_one(CurrencyTable.code == code)
