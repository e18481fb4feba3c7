"""Application layer: streets."""

import uuid

from pydantic import BaseModel, Field

from src.ichor.core.sdk.crudapp import CrudApp, QueryParams
from src.ichor.core.sdk.params import parse_uuid
from src.ichor.entities.geography import street as bus

ORDER_BY_FIELDS = {
    "id": bus.entity.ORDER_BY_ID,
    "city_id": bus.entity.ORDER_BY_CITY_ID,
    "line_1": bus.entity.ORDER_BY_LINE_1,
    "line_2": bus.entity.ORDER_BY_LINE_2,
    "postal_code": bus.entity.ORDER_BY_POSTAL_CODE,
}


class Street(BaseModel):
    id: uuid.UUID
    city_id: uuid.UUID
    line_1: str
    line_2: str
    postal_code: str


class NewStreet(BaseModel):
    city_id: uuid.UUID
    line_1: str = Field(min_length=1, max_length=100)
    line_2: str = Field(default="", max_length=100)
    postal_code: str = Field(min_length=1, max_length=20)


class UpdateStreet(BaseModel):
    city_id: uuid.UUID | None = None
    line_1: str | None = Field(default=None, min_length=1, max_length=100)
    line_2: str | None = Field(default=None, max_length=100)
    postal_code: str | None = Field(default=None, min_length=1, max_length=20)


class StreetQueryParams(QueryParams):
    id: str | None = None
    city_id: str | None = None
    line_1: str | None = None
    line_2: str | None = None
    postal_code: str | None = None


class StreetApp(CrudApp[Street, StreetQueryParams]):
    label = "street"
    app_model = Street
    new_model = bus.NewStreet
    update_model = bus.UpdateStreet
    order_by_fields = ORDER_BY_FIELDS
    default_order_by = bus.entity.DEFAULT_ORDER_BY

    def parse_filter(self, qp: StreetQueryParams) -> bus.StreetFilter:
        return bus.StreetFilter(
            id=parse_uuid("id", qp.id),
            city_id=parse_uuid("city_id", qp.city_id),
            line_1=qp.line_1 or None,
            line_2=qp.line_2 or None,
            postal_code=qp.postal_code or None,
        )
