from src.ichor.core.services.database.store import SqlStore, contains
from src.ichor.entities.inventory.lot_trackings import entity as lt
from src.ichor.entities.inventory.lot_trackings.entity import (
    LotTrackings,
    LotTrackingsFilter,
    LotTrackingsForeignKeyError,
    LotTrackingsNotFoundError,
    LotTrackingsUniqueError,
)
from src.ichor.entities.inventory.lot_trackings.table import LotTrackingsTable


class LotTrackingsRepository(SqlStore[LotTrackings, LotTrackingsFilter]):
    table = LotTrackingsTable
    entity = LotTrackings
    not_found_error = LotTrackingsNotFoundError
    unique_error = LotTrackingsUniqueError
    foreign_key_error = LotTrackingsForeignKeyError
    default_order = lt.DEFAULT_ORDER_BY
    order_columns = {
        lt.ORDER_BY_ID: "id",
        lt.ORDER_BY_SUPPLIER_PRODUCT_ID: "supplier_product_id",
        lt.ORDER_BY_LOT_NUMBER: "lot_number",
        lt.ORDER_BY_MANUFACTURE_DATE: "manufacture_date",
        lt.ORDER_BY_EXPIRATION_DATE: "expiration_date",
        lt.ORDER_BY_RECEIVED_DATE: "received_date",
        lt.ORDER_BY_QUANTITY: "quantity",
        lt.ORDER_BY_QUALITY_STATUS: "quality_status",
        lt.ORDER_BY_CREATED_DATE: "created_date",
        lt.ORDER_BY_UPDATED_DATE: "updated_date",
    }

    def _apply_filter(self, stmt, flt: LotTrackingsFilter):
        t = LotTrackingsTable
        if flt.id is not None:
            stmt = stmt.where(t.id == flt.id)
        if flt.supplier_product_id is not None:
            stmt = stmt.where(t.supplier_product_id == flt.supplier_product_id)
        if flt.lot_number:
            stmt = stmt.where(contains(t.lot_number, flt.lot_number))
        if flt.manufacture_date is not None:
            stmt = stmt.where(t.manufacture_date == flt.manufacture_date)
        if flt.expiration_date is not None:
            stmt = stmt.where(t.expiration_date == flt.expiration_date)
        if flt.received_date is not None:
            stmt = stmt.where(t.received_date == flt.received_date)
        if flt.quantity is not None:
            stmt = stmt.where(t.quantity == flt.quantity)
        if flt.quality_status:
            stmt = stmt.where(t.quality_status == flt.quality_status)
        if flt.expiry_before is not None:
            stmt = stmt.where(t.expiration_date < flt.expiry_before)
        if flt.expiry_after is not None:
            stmt = stmt.where(t.expiration_date > flt.expiry_after)
        return stmt
