"""Entity package: Supplier."""

from .entity import (
    DOMAIN_NAME,
    NewSupplier,
    Supplier,
    SupplierFilter,
    SupplierNotFoundError,
    SupplierUniqueError,
    UpdateSupplier,
)
from .repository import SupplierRepository
from .service import SupplierService
from .table import SupplierTable

__all__ = [
    "DOMAIN_NAME",
    "NewSupplier",
    "Supplier",
    "SupplierFilter",
    "SupplierNotFoundError",
    "SupplierRepository",
    "SupplierService",
    "SupplierTable",
    "SupplierUniqueError",
    "UpdateSupplier",
]
