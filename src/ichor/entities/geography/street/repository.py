from src.ichor.core.services.database.store import SqlStore, contains
from src.ichor.entities.geography.street import entity as st
from src.ichor.entities.geography.street.entity import (
    Street,
    StreetFilter,
    StreetForeignKeyError,
    StreetNotFoundError,
)
from src.ichor.entities.geography.street.table import StreetTable


class StreetRepository(SqlStore[Street, StreetFilter]):
    table = StreetTable
    entity = Street
    not_found_error = StreetNotFoundError
    foreign_key_error = StreetForeignKeyError
    default_order = st.DEFAULT_ORDER_BY
    order_columns = {
        st.ORDER_BY_ID: "id",
        st.ORDER_BY_CITY_ID: "city_id",
        st.ORDER_BY_LINE_1: "line_1",
        st.ORDER_BY_LINE_2: "line_2",
        st.ORDER_BY_POSTAL_CODE: "postal_code",
    }

    def _apply_filter(self, stmt, flt: StreetFilter):
        if flt.id is not None:
            stmt = stmt.where(StreetTable.id == flt.id)
        if flt.city_id is not None:
            stmt = stmt.where(StreetTable.city_id == flt.city_id)
        if flt.line_1:
            stmt = stmt.where(contains(StreetTable.line_1, flt.line_1))
        if flt.line_2:
            stmt = stmt.where(contains(StreetTable.line_2, flt.line_2))
        if flt.postal_code:
            stmt = stmt.where(StreetTable.postal_code == flt.postal_code)
        return stmt
