from src.ichor.core.services.database.store import SqlStore, contains
from src.ichor.entities.hr.office import entity as ofc
from src.ichor.entities.hr.office.entity import (
    Office,
    OfficeFilter,
    OfficeForeignKeyError,
    OfficeNotFoundError,
    OfficeUniqueError,
)
from src.ichor.entities.hr.office.table import OfficeTable


class OfficeRepository(SqlStore[Office, OfficeFilter]):
    table = OfficeTable
    entity = Office
    not_found_error = OfficeNotFoundError
    unique_error = OfficeUniqueError
    foreign_key_error = OfficeForeignKeyError
    default_order = ofc.DEFAULT_ORDER_BY
    order_columns = {
        ofc.ORDER_BY_ID: "id",
        ofc.ORDER_BY_NAME: "name",
        ofc.ORDER_BY_STREET_ID: "street_id",
    }

    def _apply_filter(self, stmt, flt: OfficeFilter):
        if flt.id is not None:
            stmt = stmt.where(OfficeTable.id == flt.id)
        if flt.name:
            stmt = stmt.where(contains(OfficeTable.name, flt.name))
        if flt.street_id is not None:
            stmt = stmt.where(OfficeTable.street_id == flt.street_id)
        return stmt
