"""Entity: OrderLineItem, one product line on a sales order."""

import uuid
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Literal

from pydantic import BaseModel

from src.ichor.core.sdk.errors import NotFoundError
from src.ichor.core.sdk.order import ASC, OrderBy
from src.ichor.entities._base import Entity, UTCDateTime

DOMAIN_NAME = "orderlineitem"

DISCOUNT_FLAT = "flat"
DISCOUNT_PERCENT = "percent"
DISCOUNT_TYPES = (DISCOUNT_FLAT, DISCOUNT_PERCENT)

DiscountType = Literal["flat", "percent"]

ORDER_BY_ID = "id"
ORDER_BY_ORDER_ID = "order_id"
ORDER_BY_PRODUCT_ID = "product_id"
ORDER_BY_DESCRIPTION = "description"
ORDER_BY_QUANTITY = "quantity"
ORDER_BY_UNIT_PRICE = "unit_price"
ORDER_BY_DISCOUNT = "discount"
ORDER_BY_LINE_TOTAL = "line_total"
ORDER_BY_FULFILLMENT_STATUS_ID = "line_item_fulfillment_statuses_id"
ORDER_BY_CREATED_BY = "created_by"
ORDER_BY_CREATED_DATE = "created_date"
ORDER_BY_UPDATED_BY = "updated_by"
ORDER_BY_UPDATED_DATE = "updated_date"

DEFAULT_ORDER_BY = OrderBy.new(ORDER_BY_CREATED_DATE, ASC)

_CENTS = Decimal("0.01")


def line_total(
    quantity: int, unit_price: Decimal, discount: Decimal, discount_type: str
) -> Decimal:
    """Extended price after discount, rounded to cents and never negative."""
    gross = Decimal(quantity) * unit_price
    if discount_type == DISCOUNT_PERCENT:
        total = gross * (1 - discount / 100)
    else:
        total = gross - discount
    return max(total, Decimal(0)).quantize(_CENTS, rounding=ROUND_HALF_UP)


class OrderLineItemNotFoundError(NotFoundError):
    def __init__(self, message: str = "order line item not found"):
        super().__init__(message)


class OrderLineItem(Entity):
    order_id: uuid.UUID
    product_id: uuid.UUID
    description: str
    quantity: int
    unit_price: Decimal
    discount: Decimal
    discount_type: DiscountType
    line_total: Decimal
    line_item_fulfillment_statuses_id: uuid.UUID
    created_by: uuid.UUID
    created_date: UTCDateTime
    updated_by: uuid.UUID
    updated_date: UTCDateTime


class NewOrderLineItem(BaseModel):
    order_id: uuid.UUID
    product_id: uuid.UUID
    description: str = ""
    quantity: int
    unit_price: Decimal
    discount: Decimal = Decimal(0)
    discount_type: DiscountType = DISCOUNT_FLAT
    line_total: Decimal | None = None
    line_item_fulfillment_statuses_id: uuid.UUID
    created_by: uuid.UUID


class UpdateOrderLineItem(BaseModel):
    order_id: uuid.UUID | None = None
    product_id: uuid.UUID | None = None
    description: str | None = None
    quantity: int | None = None
    unit_price: Decimal | None = None
    discount: Decimal | None = None
    discount_type: DiscountType | None = None
    line_total: Decimal | None = None
    line_item_fulfillment_statuses_id: uuid.UUID | None = None
    updated_by: uuid.UUID | None = None


class OrderLineItemFilter(BaseModel):
    id: uuid.UUID | None = None
    order_id: uuid.UUID | None = None
    product_id: uuid.UUID | None = None
    description: str | None = None
    quantity: int | None = None
    discount_type: DiscountType | None = None
    line_item_fulfillment_statuses_id: uuid.UUID | None = None
    created_by: uuid.UUID | None = None
    updated_by: uuid.UUID | None = None
    start_created_date: datetime | None = None
    end_created_date: datetime | None = None
    start_updated_date: datetime | None = None
    end_updated_date: datetime | None = None
