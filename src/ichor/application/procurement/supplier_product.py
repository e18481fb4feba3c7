"""Application layer: supplier products."""

import uuid
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from src.ichor.core.sdk.crudapp import CrudApp, QueryParams
from src.ichor.core.sdk.params import parse_bool, parse_decimal, parse_int, parse_uuid
from src.ichor.entities._base import UTCDateTime
from src.ichor.entities.procurement import supplier_product as bus

ORDER_BY_FIELDS = {
    "id": bus.entity.ORDER_BY_ID,
    "supplier_id": bus.entity.ORDER_BY_SUPPLIER_ID,
    "product_id": bus.entity.ORDER_BY_PRODUCT_ID,
    "supplier_part_number": bus.entity.ORDER_BY_SUPPLIER_PART_NUMBER,
    "min_order_quantity": bus.entity.ORDER_BY_MIN_ORDER_QUANTITY,
    "max_order_quantity": bus.entity.ORDER_BY_MAX_ORDER_QUANTITY,
    "lead_time_days": bus.entity.ORDER_BY_LEAD_TIME_DAYS,
    "unit_cost": bus.entity.ORDER_BY_UNIT_COST,
    "is_primary_supplier": bus.entity.ORDER_BY_IS_PRIMARY_SUPPLIER,
    "created_date": bus.entity.ORDER_BY_CREATED_DATE,
    "updated_date": bus.entity.ORDER_BY_UPDATED_DATE,
}


class SupplierProduct(BaseModel):
    id: uuid.UUID
    supplier_id: uuid.UUID
    product_id: uuid.UUID
    supplier_part_number: str
    min_order_quantity: int
    max_order_quantity: int
    lead_time_days: int
    unit_cost: Decimal
    is_primary_supplier: bool
    created_date: UTCDateTime
    updated_date: UTCDateTime


class NewSupplierProduct(BaseModel):
    supplier_id: uuid.UUID
    product_id: uuid.UUID
    supplier_part_number: str = Field(min_length=1, max_length=100)
    min_order_quantity: int = Field(ge=1)
    max_order_quantity: int = Field(ge=1)
    lead_time_days: int = Field(ge=0)
    unit_cost: Decimal = Field(ge=0)
    is_primary_supplier: bool = False

    @model_validator(mode="after")
    def _quantity_range(self):
        if self.max_order_quantity < self.min_order_quantity:
            raise ValueError("max_order_quantity must be at least min_order_quantity")
        return self


class UpdateSupplierProduct(BaseModel):
    supplier_id: uuid.UUID | None = None
    product_id: uuid.UUID | None = None
    supplier_part_number: str | None = Field(default=None, min_length=1, max_length=100)
    min_order_quantity: int | None = Field(default=None, ge=1)
    max_order_quantity: int | None = Field(default=None, ge=1)
    lead_time_days: int | None = Field(default=None, ge=0)
    unit_cost: Decimal | None = Field(default=None, ge=0)
    is_primary_supplier: bool | None = None


class SupplierProductQueryParams(QueryParams):
    id: str | None = None
    supplier_id: str | None = None
    product_id: str | None = None
    supplier_part_number: str | None = None
    min_order_quantity: str | None = None
    max_order_quantity: str | None = None
    lead_time_days: str | None = None
    unit_cost: str | None = None
    is_primary_supplier: str | None = None


class SupplierProductApp(CrudApp[SupplierProduct, SupplierProductQueryParams]):
    label = "supplierproduct"
    app_model = SupplierProduct
    new_model = bus.NewSupplierProduct
    update_model = bus.UpdateSupplierProduct
    order_by_fields = ORDER_BY_FIELDS
    default_order_by = bus.entity.DEFAULT_ORDER_BY

    def parse_filter(self, qp: SupplierProductQueryParams) -> bus.SupplierProductFilter:
        return bus.SupplierProductFilter(
            id=parse_uuid("id", qp.id),
            supplier_id=parse_uuid("supplier_id", qp.supplier_id),
            product_id=parse_uuid("product_id", qp.product_id),
            supplier_part_number=qp.supplier_part_number or None,
            min_order_quantity=parse_int("min_order_quantity", qp.min_order_quantity),
            max_order_quantity=parse_int("max_order_quantity", qp.max_order_quantity),
            lead_time_days=parse_int("lead_time_days", qp.lead_time_days),
            unit_cost=parse_decimal("unit_cost", qp.unit_cost),
            is_primary_supplier=parse_bool("is_primary_supplier", qp.is_primary_supplier),
        )
