"""Purchase order line item status endpoints."""

from src.ichor.api.http.routers.crud import crud_router
from src.ichor.application.procurement import po_line_item_status as statusapp
from src.ichor.entities.procurement.po_line_item_status import PurchaseOrderLineItemStatusService

router = crud_router(
    app_cls=statusapp.PurchaseOrderLineItemStatusApp,
    service_cls=PurchaseOrderLineItemStatusService,
    table="procurement.purchase_order_line_item_statuses",
    model=statusapp.PurchaseOrderLineItemStatus,
    new_model=statusapp.NewPurchaseOrderLineItemStatus,
    update_model=statusapp.UpdatePurchaseOrderLineItemStatus,
    query_model=statusapp.PurchaseOrderLineItemStatusQueryParams,
    include_all=True,
)
