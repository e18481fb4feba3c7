from src.ichor.core.services.database.store import SqlStore, contains
from src.ichor.entities.procurement.po_line_item_status import entity as st
from src.ichor.entities.procurement.po_line_item_status.entity import (
    PurchaseOrderLineItemStatus,
    PurchaseOrderLineItemStatusFilter,
    PurchaseOrderLineItemStatusNotFoundError,
    PurchaseOrderLineItemStatusUniqueError,
)
from src.ichor.entities.procurement.po_line_item_status.table import (
    PurchaseOrderLineItemStatusTable,
)


class PurchaseOrderLineItemStatusRepository(
    SqlStore[PurchaseOrderLineItemStatus, PurchaseOrderLineItemStatusFilter]
):
    table = PurchaseOrderLineItemStatusTable
    entity = PurchaseOrderLineItemStatus
    not_found_error = PurchaseOrderLineItemStatusNotFoundError
    unique_error = PurchaseOrderLineItemStatusUniqueError
    default_order = st.DEFAULT_ORDER_BY
    order_columns = {
        st.ORDER_BY_ID: "id",
        st.ORDER_BY_NAME: "name",
        st.ORDER_BY_SORT_ORDER: "sort_order",
    }

    def _apply_filter(self, stmt, flt: PurchaseOrderLineItemStatusFilter):
        t = PurchaseOrderLineItemStatusTable
        if flt.id is not None:
            stmt = stmt.where(t.id == flt.id)
        if flt.name:
            stmt = stmt.where(contains(t.name, flt.name))
        return stmt

    def query_by_name(self, name: str) -> PurchaseOrderLineItemStatus:
        return self._query_one(PurchaseOrderLineItemStatusTable.name == name)
