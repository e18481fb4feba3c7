"""Entity: SupplierProduct, a product as offered by one supplier."""

import uuid
from decimal import Decimal

from pydantic import BaseModel

from src.ichor.core.sdk.errors import (
    ForeignKeyViolationError,
    NotFoundError,
    UniqueEntryError,
)
from src.ichor.core.sdk.order import ASC, OrderBy
from src.ichor.entities._base import Entity, UTCDateTime

DOMAIN_NAME = "supplierproduct"

ORDER_BY_ID = "id"
ORDER_BY_SUPPLIER_ID = "supplier_id"
ORDER_BY_PRODUCT_ID = "product_id"
ORDER_BY_SUPPLIER_PART_NUMBER = "supplier_part_number"
ORDER_BY_MIN_ORDER_QUANTITY = "min_order_quantity"
ORDER_BY_MAX_ORDER_QUANTITY = "max_order_quantity"
ORDER_BY_LEAD_TIME_DAYS = "lead_time_days"
ORDER_BY_UNIT_COST = "unit_cost"
ORDER_BY_IS_PRIMARY_SUPPLIER = "is_primary_supplier"
ORDER_BY_CREATED_DATE = "created_date"
ORDER_BY_UPDATED_DATE = "updated_date"

DEFAULT_ORDER_BY = OrderBy.new(ORDER_BY_SUPPLIER_PART_NUMBER, ASC)


class SupplierProductNotFoundError(NotFoundError):
    def __init__(self, message: str = "supplier product not found"):
        super().__init__(message)


class SupplierProductUniqueError(UniqueEntryError):
    def __init__(self, message: str = "supplier product entry is not unique"):
        super().__init__(message)


class SupplierProductForeignKeyError(ForeignKeyViolationError):
    def __init__(self, message: str = "supplier does not exist"):
        super().__init__(message)


class SupplierProduct(Entity):
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
    supplier_part_number: str
    min_order_quantity: int
    max_order_quantity: int
    lead_time_days: int
    unit_cost: Decimal
    is_primary_supplier: bool = False


class UpdateSupplierProduct(BaseModel):
    supplier_id: uuid.UUID | None = None
    product_id: uuid.UUID | None = None
    supplier_part_number: str | None = None
    min_order_quantity: int | None = None
    max_order_quantity: int | None = None
    lead_time_days: int | None = None
    unit_cost: Decimal | None = None
    is_primary_supplier: bool | None = None


class SupplierProductFilter(BaseModel):
    id: uuid.UUID | None = None
    supplier_id: uuid.UUID | None = None
    product_id: uuid.UUID | None = None
    supplier_part_number: str | None = None
    min_order_quantity: int | None = None
    max_order_quantity: int | None = None
    lead_time_days: int | None = None
    unit_cost: Decimal | None = None
    is_primary_supplier: bool | None = None
