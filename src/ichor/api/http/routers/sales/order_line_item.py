"""Order line item endpoints."""

from src.ichor.api.http.routers.crud import crud_router
from src.ichor.application.sales import order_line_item as lineitemapp
from src.ichor.entities.sales.order_line_item import OrderLineItemService

router = crud_router(
    app_cls=lineitemapp.OrderLineItemApp,
    service_cls=OrderLineItemService,
    table="sales.order_line_items",
    model=lineitemapp.OrderLineItem,
    new_model=lineitemapp.NewOrderLineItem,
    update_model=lineitemapp.UpdateOrderLineItem,
    query_model=lineitemapp.OrderLineItemQueryParams,
)
