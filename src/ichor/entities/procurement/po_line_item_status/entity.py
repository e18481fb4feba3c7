"""Entity: PurchaseOrderLineItemStatus, reference data for line item state."""

import uuid

from pydantic import BaseModel

from src.ichor.core.sdk.errors import NotFoundError, UniqueEntryError
from src.ichor.core.sdk.order import ASC, OrderBy
from src.ichor.entities._base import Entity

DOMAIN_NAME = "purchaseorderlineitemstatus"

ORDER_BY_ID = "id"
ORDER_BY_NAME = "name"
ORDER_BY_SORT_ORDER = "sort_order"

DEFAULT_ORDER_BY = OrderBy.new(ORDER_BY_SORT_ORDER, ASC)


class PurchaseOrderLineItemStatusNotFoundError(NotFoundError):
    def __init__(self, message: str = "purchase order line item status not found"):
        super().__init__(message)


class PurchaseOrderLineItemStatusUniqueError(UniqueEntryError):
    def __init__(
        self, message: str = "purchase order line item status entry is not unique"
    ):
        super().__init__(message)


class PurchaseOrderLineItemStatus(Entity):
    name: str
    description: str
    sort_order: int


class NewPurchaseOrderLineItemStatus(BaseModel):
    name: str
    description: str = ""
    sort_order: int = 0


class UpdatePurchaseOrderLineItemStatus(BaseModel):
    name: str | None = None
    description: str | None = None
    sort_order: int | None = None


class PurchaseOrderLineItemStatusFilter(BaseModel):
    id: uuid.UUID | None = None
    name: str | None = None
