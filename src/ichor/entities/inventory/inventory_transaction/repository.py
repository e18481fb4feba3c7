from src.ichor.core.services.database.store import SqlStore, contains
from src.ichor.entities.inventory.inventory_transaction import entity as it
from src.ichor.entities.inventory.inventory_transaction.entity import (
    InventoryTransaction,
    InventoryTransactionFilter,
    InventoryTransactionNotFoundError,
)
from src.ichor.entities.inventory.inventory_transaction.table import (
    InventoryTransactionTable,
)


class InventoryTransactionRepository(
    SqlStore[InventoryTransaction, InventoryTransactionFilter]
):
    table = InventoryTransactionTable
    entity = InventoryTransaction
    not_found_error = InventoryTransactionNotFoundError
    default_order = it.DEFAULT_ORDER_BY
    order_columns = {
        it.ORDER_BY_ID: "id",
        it.ORDER_BY_PRODUCT_ID: "product_id",
        it.ORDER_BY_LOCATION_ID: "location_id",
        it.ORDER_BY_USER_ID: "user_id",
        it.ORDER_BY_QUANTITY: "quantity",
        it.ORDER_BY_TRANSACTION_TYPE: "transaction_type",
        it.ORDER_BY_REFERENCE_NUMBER: "reference_number",
        it.ORDER_BY_TRANSACTION_DATE: "transaction_date",
        it.ORDER_BY_CREATED_DATE: "created_date",
        it.ORDER_BY_UPDATED_DATE: "updated_date",
    }

    def _apply_filter(self, stmt, flt: InventoryTransactionFilter):
        t = InventoryTransactionTable
        if flt.id is not None:
            stmt = stmt.where(t.id == flt.id)
        if flt.product_id is not None:
            stmt = stmt.where(t.product_id == flt.product_id)
        if flt.location_id is not None:
            stmt = stmt.where(t.location_id == flt.location_id)
        if flt.user_id is not None:
            stmt = stmt.where(t.user_id == flt.user_id)
        if flt.quantity is not None:
            stmt = stmt.where(t.quantity == flt.quantity)
        if flt.transaction_type:
            stmt = stmt.where(contains(t.transaction_type, flt.transaction_type))
        if flt.reference_number:
            stmt = stmt.where(contains(t.reference_number, flt.reference_number))
        if flt.transaction_date is not None:
            stmt = stmt.where(t.transaction_date == flt.transaction_date)
        if flt.start_transaction_date is not None:
            stmt = stmt.where(t.transaction_date >= flt.start_transaction_date)
        if flt.end_transaction_date is not None:
            stmt = stmt.where(t.transaction_date <= flt.end_transaction_date)
        return stmt
