"""Entity package: OrderLineItem."""

from .entity import (
    DISCOUNT_FLAT,
    DISCOUNT_PERCENT,
    DOMAIN_NAME,
    NewOrderLineItem,
    OrderLineItem,
    OrderLineItemFilter,
    OrderLineItemNotFoundError,
    UpdateOrderLineItem,
    line_total,
)
from .repository import OrderLineItemRepository
from .service import OrderLineItemService
from .table import OrderLineItemTable

__all__ = [
    "DISCOUNT_FLAT",
    "DISCOUNT_PERCENT",
    "DOMAIN_NAME",
    "NewOrderLineItem",
    "OrderLineItem",
    "OrderLineItemFilter",
    "OrderLineItemNotFoundError",
    "OrderLineItemRepository",
    "OrderLineItemService",
    "OrderLineItemTable",
    "UpdateOrderLineItem",
    "line_total",
]
