"""Inventory transaction endpoints."""

from src.ichor.api.http.routers.crud import crud_router
from src.ichor.application.inventory import inventory_transaction as transactionapp
from src.ichor.entities.inventory.inventory_transaction import InventoryTransactionService

router = crud_router(
    app_cls=transactionapp.InventoryTransactionApp,
    service_cls=InventoryTransactionService,
    table="inventory.inventory_transactions",
    model=transactionapp.InventoryTransaction,
    new_model=transactionapp.NewInventoryTransaction,
    update_model=transactionapp.UpdateInventoryTransaction,
    query_model=transactionapp.InventoryTransactionQueryParams,
)
