"""Entity package: PurchaseOrderLineItemStatus."""

from .entity import (
    DOMAIN_NAME,
    NewPurchaseOrderLineItemStatus,
    PurchaseOrderLineItemStatus,
    PurchaseOrderLineItemStatusFilter,
    PurchaseOrderLineItemStatusNotFoundError,
    PurchaseOrderLineItemStatusUniqueError,
    UpdatePurchaseOrderLineItemStatus,
)
from .repository import PurchaseOrderLineItemStatusRepository
from .service import PurchaseOrderLineItemStatusService
from .table import PurchaseOrderLineItemStatusTable

__all__ = [
    "DOMAIN_NAME",
    "NewPurchaseOrderLineItemStatus",
    "PurchaseOrderLineItemStatus",
    "PurchaseOrderLineItemStatusFilter",
    "PurchaseOrderLineItemStatusNotFoundError",
    "PurchaseOrderLineItemStatusRepository",
    "PurchaseOrderLineItemStatusService",
    "PurchaseOrderLineItemStatusTable",
    "PurchaseOrderLineItemStatusUniqueError",
    "UpdatePurchaseOrderLineItemStatus",
]
