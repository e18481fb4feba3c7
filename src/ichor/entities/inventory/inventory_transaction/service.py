from src.ichor.core.sdk.crud import CrudService
from src.ichor.entities.inventory.inventory_transaction.entity import (
    DOMAIN_NAME,
    InventoryTransaction,
    InventoryTransactionFilter,
    NewInventoryTransaction,
    UpdateInventoryTransaction,
)


class InventoryTransactionService(
    CrudService[
        InventoryTransaction,
        NewInventoryTransaction,
        UpdateInventoryTransaction,
        InventoryTransactionFilter,
    ]
):
    domain = DOMAIN_NAME
    entity = InventoryTransaction
