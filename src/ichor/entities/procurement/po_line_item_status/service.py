from src.ichor.core.sdk.crud import CrudService
from src.ichor.entities.procurement.po_line_item_status.entity import (
    DOMAIN_NAME,
    NewPurchaseOrderLineItemStatus,
    PurchaseOrderLineItemStatus,
    PurchaseOrderLineItemStatusFilter,
    UpdatePurchaseOrderLineItemStatus,
)


class PurchaseOrderLineItemStatusService(
    CrudService[
        PurchaseOrderLineItemStatus,
        NewPurchaseOrderLineItemStatus,
        UpdatePurchaseOrderLineItemStatus,
        PurchaseOrderLineItemStatusFilter,
    ]
):
    domain = DOMAIN_NAME
    entity = PurchaseOrderLineItemStatus

    def query_by_name(self, name: str) -> PurchaseOrderLineItemStatus:
        return self.storer.query_by_name(name)
