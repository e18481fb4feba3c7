"""Application layer: purchase order line item statuses."""

import uuid

from pydantic import BaseModel, Field

from src.ichor.core.sdk.crudapp import CrudApp, QueryParams
from src.ichor.core.sdk.params import parse_uuid
from src.ichor.entities.procurement import po_line_item_status as bus

ORDER_BY_FIELDS = {
    "id": bus.entity.ORDER_BY_ID,
    "name": bus.entity.ORDER_BY_NAME,
    "sort_order": bus.entity.ORDER_BY_SORT_ORDER,
}


class PurchaseOrderLineItemStatus(BaseModel):
    id: uuid.UUID
    name: str
    description: str
    sort_order: int


class NewPurchaseOrderLineItemStatus(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    description: str = Field(default="", max_length=255)
    sort_order: int = 0


class UpdatePurchaseOrderLineItemStatus(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=50)
    description: str | None = Field(default=None, max_length=255)
    sort_order: int | None = None


class PurchaseOrderLineItemStatusQueryParams(QueryParams):
    id: str | None = None
    name: str | None = None


class PurchaseOrderLineItemStatusApp(
    CrudApp[PurchaseOrderLineItemStatus, PurchaseOrderLineItemStatusQueryParams]
):
    label = "purchaseorderlineitemstatus"
    app_model = PurchaseOrderLineItemStatus
    new_model = bus.NewPurchaseOrderLineItemStatus
    update_model = bus.UpdatePurchaseOrderLineItemStatus
    order_by_fields = ORDER_BY_FIELDS
    default_order_by = bus.entity.DEFAULT_ORDER_BY

    def parse_filter(
        self, qp: PurchaseOrderLineItemStatusQueryParams
    ) -> bus.PurchaseOrderLineItemStatusFilter:
        return bus.PurchaseOrderLineItemStatusFilter(
            id=parse_uuid("id", qp.id),
            name=qp.name or None,
        )
