from src.ichor.core.services.database.store import SqlStore, contains
from src.ichor.entities.procurement.supplier_product import entity as sp
from src.ichor.entities.procurement.supplier_product.entity import (
    SupplierProduct,
    SupplierProductFilter,
    SupplierProductForeignKeyError,
    SupplierProductNotFoundError,
    SupplierProductUniqueError,
)
from src.ichor.entities.procurement.supplier_product.table import SupplierProductTable


class SupplierProductRepository(SqlStore[SupplierProduct, SupplierProductFilter]):
    table = SupplierProductTable
    entity = SupplierProduct
    not_found_error = SupplierProductNotFoundError
    unique_error = SupplierProductUniqueError
    foreign_key_error = SupplierProductForeignKeyError
    default_order = sp.DEFAULT_ORDER_BY
    order_columns = {
        sp.ORDER_BY_ID: "id",
        sp.ORDER_BY_SUPPLIER_ID: "supplier_id",
        sp.ORDER_BY_PRODUCT_ID: "product_id",
        sp.ORDER_BY_SUPPLIER_PART_NUMBER: "supplier_part_number",
        sp.ORDER_BY_MIN_ORDER_QUANTITY: "min_order_quantity",
        sp.ORDER_BY_MAX_ORDER_QUANTITY: "max_order_quantity",
        sp.ORDER_BY_LEAD_TIME_DAYS: "lead_time_days",
        sp.ORDER_BY_UNIT_COST: "unit_cost",
        sp.ORDER_BY_IS_PRIMARY_SUPPLIER: "is_primary_supplier",
        sp.ORDER_BY_CREATED_DATE: "created_date",
        sp.ORDER_BY_UPDATED_DATE: "updated_date",
    }

    def _apply_filter(self, stmt, flt: SupplierProductFilter):
        t = SupplierProductTable
        if flt.id is not None:
            stmt = stmt.where(t.id == flt.id)
        if flt.supplier_id is not None:
            stmt = stmt.where(t.supplier_id == flt.supplier_id)
        if flt.product_id is not None:
            stmt = stmt.where(t.product_id == flt.product_id)
        if flt.supplier_part_number:
            stmt = stmt.where(contains(t.supplier_part_number, flt.supplier_part_number))
        if flt.min_order_quantity is not None:
            stmt = stmt.where(t.min_order_quantity == flt.min_order_quantity)
        if flt.max_order_quantity is not None:
            stmt = stmt.where(t.max_order_quantity == flt.max_order_quantity)
        if flt.lead_time_days is not None:
            stmt = stmt.where(t.lead_time_days == flt.lead_time_days)
        if flt.unit_cost is not None:
            stmt = stmt.where(t.unit_cost == flt.unit_cost)
        if flt.is_primary_supplier is not None:
            stmt = stmt.where(t.is_primary_supplier == flt.is_primary_supplier)
        return stmt
