"""PurchaseOrderLineItemStatus database table model."""

from sqlmodel import Field

from src.ichor.entities._base import EntityTable


class PurchaseOrderLineItemStatusTable(EntityTable, table=True):
    __tablename__ = "purchase_order_line_item_statuses"

    name: str = Field(unique=True, index=True)
    description: str = ""
    sort_order: int = Field(default=0, index=True)
