from src.ichor.core.services.database.store import SqlStore, contains
from src.ichor.entities.sales.order_line_item import entity as oli
from src.ichor.entities.sales.order_line_item.entity import (
    OrderLineItem,
    OrderLineItemFilter,
    OrderLineItemNotFoundError,
)
from src.ichor.entities.sales.order_line_item.table import OrderLineItemTable


class OrderLineItemRepository(SqlStore[OrderLineItem, OrderLineItemFilter]):
    table = OrderLineItemTable
    entity = OrderLineItem
    not_found_error = OrderLineItemNotFoundError
    default_order = oli.DEFAULT_ORDER_BY
    order_columns = {
        oli.ORDER_BY_ID: "id",
        oli.ORDER_BY_ORDER_ID: "order_id",
        oli.ORDER_BY_PRODUCT_ID: "product_id",
        oli.ORDER_BY_DESCRIPTION: "description",
        oli.ORDER_BY_QUANTITY: "quantity",
        oli.ORDER_BY_UNIT_PRICE: "unit_price",
        oli.ORDER_BY_DISCOUNT: "discount",
        oli.ORDER_BY_LINE_TOTAL: "line_total",
        oli.ORDER_BY_FULFILLMENT_STATUS_ID: "line_item_fulfillment_statuses_id",
        oli.ORDER_BY_CREATED_BY: "created_by",
        oli.ORDER_BY_CREATED_DATE: "created_date",
        oli.ORDER_BY_UPDATED_BY: "updated_by",
        oli.ORDER_BY_UPDATED_DATE: "updated_date",
    }

    def _apply_filter(self, stmt, flt: OrderLineItemFilter):
        t = OrderLineItemTable
        if flt.id is not None:
            stmt = stmt.where(t.id == flt.id)
        if flt.order_id is not None:
            stmt = stmt.where(t.order_id == flt.order_id)
        if flt.product_id is not None:
            stmt = stmt.where(t.product_id == flt.product_id)
        if flt.description:
            stmt = stmt.where(contains(t.description, flt.description))
        if flt.quantity is not None:
            stmt = stmt.where(t.quantity == flt.quantity)
        if flt.discount_type is not None:
            stmt = stmt.where(t.discount_type == flt.discount_type)
        if flt.line_item_fulfillment_statuses_id is not None:
            stmt = stmt.where(
                t.line_item_fulfillment_statuses_id
                == flt.line_item_fulfillment_statuses_id
            )
        if flt.created_by is not None:
            stmt = stmt.where(t.created_by == flt.created_by)
        if flt.updated_by is not None:
            stmt = stmt.where(t.updated_by == flt.updated_by)
        if flt.start_created_date is not None:
            stmt = stmt.where(t.created_date >= flt.start_created_date)
        if flt.end_created_date is not None:
            stmt = stmt.where(t.created_date <= flt.end_created_date)
        if flt.start_updated_date is not None:
            stmt = stmt.where(t.updated_date >= flt.start_updated_date)
        if flt.end_updated_date is not None:
            stmt = stmt.where(t.updated_date <= flt.end_updated_date)
        return stmt
