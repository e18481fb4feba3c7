"""Entity package: SupplierProduct."""

from .entity import (
    DOMAIN_NAME,
    NewSupplierProduct,
    SupplierProduct,
    SupplierProductFilter,
    SupplierProductForeignKeyError,
    SupplierProductNotFoundError,
    SupplierProductUniqueError,
    UpdateSupplierProduct,
)
from .repository import SupplierProductRepository
from .service import SupplierProductService
from .table import SupplierProductTable

__all__ = [
    "DOMAIN_NAME",
    "NewSupplierProduct",
    "SupplierProduct",
    "SupplierProductFilter",
    "SupplierProductForeignKeyError",
    "SupplierProductNotFoundError",
    "SupplierProductRepository",
    "SupplierProductService",
    "SupplierProductTable",
    "SupplierProductUniqueError",
    "UpdateSupplierProduct",
]
