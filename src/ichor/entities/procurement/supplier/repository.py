from src.ichor.core.services.database.store import SqlStore, contains
from src.ichor.entities.procurement.supplier import entity as sup
from src.ichor.entities.procurement.supplier.entity import (
    Supplier,
    SupplierFilter,
    SupplierNotFoundError,
    SupplierUniqueError,
)
from src.ichor.entities.procurement.supplier.table import SupplierTable


class SupplierRepository(SqlStore[Supplier, SupplierFilter]):
    table = SupplierTable
    entity = Supplier
    not_found_error = SupplierNotFoundError
    unique_error = SupplierUniqueError
    default_order = sup.DEFAULT_ORDER_BY
    order_columns = {
        sup.ORDER_BY_ID: "id",
        sup.ORDER_BY_CONTACT_INFOS_ID: "contact_infos_id",
        sup.ORDER_BY_NAME: "name",
        sup.ORDER_BY_PAYMENT_TERM_ID: "payment_term_id",
        sup.ORDER_BY_LEAD_TIME_DAYS: "lead_time_days",
        sup.ORDER_BY_RATING: "rating",
        sup.ORDER_BY_IS_ACTIVE: "is_active",
        sup.ORDER_BY_CREATED_DATE: "created_date",
        sup.ORDER_BY_UPDATED_DATE: "updated_date",
    }

    def _apply_filter(self, stmt, flt: SupplierFilter):
        t = SupplierTable
        if flt.id is not None:
            stmt = stmt.where(t.id == flt.id)
        if flt.contact_infos_id is not None:
            stmt = stmt.where(t.contact_infos_id == flt.contact_infos_id)
        if flt.name:
            stmt = stmt.where(contains(t.name, flt.name))
        if flt.payment_term_id is not None:
            stmt = stmt.where(t.payment_term_id == flt.payment_term_id)
        if flt.lead_time_days is not None:
            stmt = stmt.where(t.lead_time_days == flt.lead_time_days)
        if flt.rating is not None:
            stmt = stmt.where(t.rating == flt.rating)
        if flt.is_active is not None:
            stmt = stmt.where(t.is_active == flt.is_active)
        return stmt
