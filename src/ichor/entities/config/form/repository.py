from src.ichor.core.services.database.store import SqlStore, contains
from src.ichor.entities.config.form import entity as frm
from src.ichor.entities.config.form.entity import (
    Form,
    FormFilter,
    FormNotFoundError,
    FormUniqueError,
)
from src.ichor.entities.config.form.table import FormTable


class FormRepository(SqlStore[Form, FormFilter]):
    table = FormTable
    entity = Form
    not_found_error = FormNotFoundError
    unique_error = FormUniqueError
    default_order = frm.DEFAULT_ORDER_BY
    order_columns = {
        frm.ORDER_BY_ID: "id",
        frm.ORDER_BY_NAME: "name",
        frm.ORDER_BY_IS_REFERENCE_DATA: "is_reference_data",
    }

    def _apply_filter(self, stmt, flt: FormFilter):
        if flt.id is not None:
            stmt = stmt.where(FormTable.id == flt.id)
        if flt.name:
            stmt = stmt.where(contains(FormTable.name, flt.name))
        if flt.is_reference_data is not None:
            stmt = stmt.where(FormTable.is_reference_data == flt.is_reference_data)
        return stmt

    def query_by_name(self, name: str) -> Form:
        return self._query_one(FormTable.name == name)
