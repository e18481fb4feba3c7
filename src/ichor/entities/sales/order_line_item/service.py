from datetime import datetime
from typing import Any

from src.ichor.core.sdk.crud import CrudService
from src.ichor.entities.sales.order_line_item.entity import (
    DOMAIN_NAME,
    NewOrderLineItem,
    OrderLineItem,
    OrderLineItemFilter,
    UpdateOrderLineItem,
    line_total,
)

_PRICING_FIELDS = {"quantity", "unit_price", "discount", "discount_type"}


class OrderLineItemService(
    CrudService[OrderLineItem, NewOrderLineItem, UpdateOrderLineItem, OrderLineItemFilter]
):
    domain = DOMAIN_NAME
    entity = OrderLineItem

    def _build(self, new: NewOrderLineItem, now: datetime) -> OrderLineItem:
        if new.line_total is None:
            new = new.model_copy(
                update={
                    "line_total": line_total(
                        new.quantity, new.unit_price, new.discount, new.discount_type
                    )
                }
            )
        return super()._build(new, now)

    def _changes(self, entity: OrderLineItem, upd: UpdateOrderLineItem) -> dict[str, Any]:
        changes = super()._changes(entity, upd)
        # Repricing without an explicit total recomputes it.
        if "line_total" not in changes and _PRICING_FIELDS & changes.keys():
            merged = entity.model_copy(update=changes)
            changes["line_total"] = line_total(
                merged.quantity, merged.unit_price, merged.discount, merged.discount_type
            )
        return changes
