"""Entity package: InventoryTransaction."""

from .entity import (
    DOMAIN_NAME,
    InventoryTransaction,
    InventoryTransactionFilter,
    InventoryTransactionNotFoundError,
    NewInventoryTransaction,
    UpdateInventoryTransaction,
)
from .repository import InventoryTransactionRepository
from .service import InventoryTransactionService
from .table import InventoryTransactionTable

__all__ = [
    "DOMAIN_NAME",
    "InventoryTransaction",
    "InventoryTransactionFilter",
    "InventoryTransactionNotFoundError",
    "InventoryTransactionRepository",
    "InventoryTransactionService",
    "InventoryTransactionTable",
    "NewInventoryTransaction",
    "UpdateInventoryTransaction",
]
