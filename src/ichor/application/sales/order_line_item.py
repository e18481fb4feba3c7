"""Application layer: order line items.

``line_total`` may be supplied by the client; when it is left out it is
derived from quantity, unit price and discount.
"""

import uuid
from decimal import Decimal

from pydantic import BaseModel, Field

from src.ichor.core.sdk.crudapp import CrudApp, QueryParams
from src.ichor.core.sdk.params import parse_choice, parse_datetime, parse_int, parse_uuid
from src.ichor.entities._base import UTCDateTime
from src.ichor.entities.sales import order_line_item as bus
from src.ichor.entities.sales.order_line_item.entity import DISCOUNT_TYPES, DiscountType

ORDER_BY_FIELDS = {
    "id": bus.entity.ORDER_BY_ID,
    "order_id": bus.entity.ORDER_BY_ORDER_ID,
    "product_id": bus.entity.ORDER_BY_PRODUCT_ID,
    "description": bus.entity.ORDER_BY_DESCRIPTION,
    "quantity": bus.entity.ORDER_BY_QUANTITY,
    "unit_price": bus.entity.ORDER_BY_UNIT_PRICE,
    "discount": bus.entity.ORDER_BY_DISCOUNT,
    "line_total": bus.entity.ORDER_BY_LINE_TOTAL,
    "line_item_fulfillment_statuses_id": bus.entity.ORDER_BY_FULFILLMENT_STATUS_ID,
    "created_by": bus.entity.ORDER_BY_CREATED_BY,
    "created_date": bus.entity.ORDER_BY_CREATED_DATE,
    "updated_by": bus.entity.ORDER_BY_UPDATED_BY,
    "updated_date": bus.entity.ORDER_BY_UPDATED_DATE,
}


class OrderLineItem(BaseModel):
    id: uuid.UUID
    order_id: uuid.UUID
    product_id: uuid.UUID
    description: str
    quantity: int
    unit_price: Decimal
    discount: Decimal
    discount_type: str
    line_total: Decimal
    line_item_fulfillment_statuses_id: uuid.UUID
    created_by: uuid.UUID
    created_date: UTCDateTime
    updated_by: uuid.UUID
    updated_date: UTCDateTime


class NewOrderLineItem(BaseModel):
    order_id: uuid.UUID
    product_id: uuid.UUID
    description: str = Field(default="", max_length=500)
    quantity: int = Field(ge=1)
    unit_price: Decimal = Field(ge=0)
    discount: Decimal = Field(default=Decimal(0), ge=0)
    discount_type: DiscountType = "flat"
    line_total: Decimal | None = Field(default=None, ge=0)
    line_item_fulfillment_statuses_id: uuid.UUID
    created_by: uuid.UUID


class UpdateOrderLineItem(BaseModel):
    order_id: uuid.UUID | None = None
    product_id: uuid.UUID | None = None
    description: str | None = Field(default=None, max_length=500)
    quantity: int | None = Field(default=None, ge=1)
    unit_price: Decimal | None = Field(default=None, ge=0)
    discount: Decimal | None = Field(default=None, ge=0)
    discount_type: DiscountType | None = None
    line_total: Decimal | None = Field(default=None, ge=0)
    line_item_fulfillment_statuses_id: uuid.UUID | None = None
    updated_by: uuid.UUID | None = None


class OrderLineItemQueryParams(QueryParams):
    id: str | None = None
    order_id: str | None = None
    product_id: str | None = None
    description: str | None = None
    quantity: str | None = None
    discount_type: str | None = None
    line_item_fulfillment_statuses_id: str | None = None
    created_by: str | None = None
    updated_by: str | None = None
    start_created_date: str | None = None
    end_created_date: str | None = None
    start_updated_date: str | None = None
    end_updated_date: str | None = None


class OrderLineItemApp(CrudApp[OrderLineItem, OrderLineItemQueryParams]):
    label = "orderlineitem"
    app_model = OrderLineItem
    new_model = bus.NewOrderLineItem
    update_model = bus.UpdateOrderLineItem
    order_by_fields = ORDER_BY_FIELDS
    default_order_by = bus.entity.DEFAULT_ORDER_BY

    def parse_filter(self, qp: OrderLineItemQueryParams) -> bus.OrderLineItemFilter:
        return bus.OrderLineItemFilter(
            id=parse_uuid("id", qp.id),
            order_id=parse_uuid("order_id", qp.order_id),
            product_id=parse_uuid("product_id", qp.product_id),
            description=qp.description or None,
            quantity=parse_int("quantity", qp.quantity),
            discount_type=parse_choice("discount_type", qp.discount_type, DISCOUNT_TYPES),
            line_item_fulfillment_statuses_id=parse_uuid(
                "line_item_fulfillment_statuses_id", qp.line_item_fulfillment_statuses_id
            ),
            created_by=parse_uuid("created_by", qp.created_by),
            updated_by=parse_uuid("updated_by", qp.updated_by),
            start_created_date=parse_datetime("start_created_date", qp.start_created_date),
            end_created_date=parse_datetime("end_created_date", qp.end_created_date),
            start_updated_date=parse_datetime("start_updated_date", qp.start_updated_date),
            end_updated_date=parse_datetime("end_updated_date", qp.end_updated_date),
        )
