"""Application layer: offices."""

import uuid

from pydantic import BaseModel, Field

from src.ichor.core.sdk.crudapp import CrudApp, QueryParams
from src.ichor.core.sdk.params import parse_uuid
from src.ichor.entities.hr import office as bus

ORDER_BY_FIELDS = {
    "id": bus.entity.ORDER_BY_ID,
    "name": bus.entity.ORDER_BY_NAME,
    "street_id": bus.entity.ORDER_BY_STREET_ID,
}


class Office(BaseModel):
    id: uuid.UUID
    name: str
    street_id: uuid.UUID


class NewOffice(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    street_id: uuid.UUID


class UpdateOffice(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    street_id: uuid.UUID | None = None


class OfficeQueryParams(QueryParams):
    id: str | None = None
    name: str | None = None
    street_id: str | None = None


class OfficeApp(CrudApp[Office, OfficeQueryParams]):
    label = "office"
    app_model = Office
    new_model = bus.NewOffice
    update_model = bus.UpdateOffice
    order_by_fields = ORDER_BY_FIELDS
    default_order_by = bus.entity.DEFAULT_ORDER_BY

    def parse_filter(self, qp: OfficeQueryParams) -> bus.OfficeFilter:
        return bus.OfficeFilter(
            id=parse_uuid("id", qp.id),
            name=qp.name or None,
            street_id=parse_uuid("street_id", qp.street_id),
        )
