"""Entities grouped by business area.

Every entity lives in its own package under its area:
- entity.py: business model, filter, update model and domain errors
- table.py: database row model
- repository.py: SQL storer
- service.py: business service

Importing this package registers every table with ``SQLModel.metadata``.
"""

from .assets.asset_tag import AssetTagTable
from .assets.tag import TagTable
from .config.form import FormTable
from .core.currency import CurrencyTable
from .core.user import UserTable
from .geography.city import CityTable
from .geography.country import CountryTable
from .geography.region import RegionTable
from .geography.street import StreetTable
from .hr.office import OfficeTable
from .inventory.inventory_transaction import InventoryTransactionTable
from .inventory.lot_trackings import LotTrackingsTable
from .procurement.po_line_item_status import PurchaseOrderLineItemStatusTable
from .procurement.supplier import SupplierTable
from .procurement.supplier_product import SupplierProductTable
from .sales.order_line_item import OrderLineItemTable

__all__ = [
    "AssetTagTable",
    "CityTable",
    "CountryTable",
    "CurrencyTable",
    "FormTable",
    "InventoryTransactionTable",
    "LotTrackingsTable",
    "OfficeTable",
    "OrderLineItemTable",
    "PurchaseOrderLineItemStatusTable",
    "RegionTable",
    "StreetTable",
    "SupplierProductTable",
    "SupplierTable",
    "TagTable",
    "UserTable",
]
