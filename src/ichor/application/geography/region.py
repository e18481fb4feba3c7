"""Application layer: regions."""

import uuid

from pydantic import BaseModel, Field

from src.ichor.core.sdk.crudapp import CrudApp, QueryParams
from src.ichor.core.sdk.params import parse_uuid
from src.ichor.entities.geography import region as bus

ORDER_BY_FIELDS = {
    "id": bus.entity.ORDER_BY_ID,
    "country_id": bus.entity.ORDER_BY_COUNTRY_ID,
    "name": bus.entity.ORDER_BY_NAME,
    "code": bus.entity.ORDER_BY_CODE,
}


class Region(BaseModel):
    id: uuid.UUID
    country_id: uuid.UUID
    name: str
    code: str


class NewRegion(BaseModel):
    country_id: uuid.UUID
    name: str = Field(min_length=1, max_length=100)
    code: str = Field(min_length=1, max_length=10)


class UpdateRegion(BaseModel):
    country_id: uuid.UUID | None = None
    name: str | None = Field(default=None, min_length=1, max_length=100)
    code: str | None = Field(default=None, min_length=1, max_length=10)


class RegionQueryParams(QueryParams):
    id: str | None = None
    country_id: str | None = None
    name: str | None = None
    code: str | None = None


class RegionApp(CrudApp[Region, RegionQueryParams]):
    label = "region"
    app_model = Region
    new_model = bus.NewRegion
    update_model = bus.UpdateRegion
    order_by_fields = ORDER_BY_FIELDS
    default_order_by = bus.entity.DEFAULT_ORDER_BY

    def parse_filter(self, qp: RegionQueryParams) -> bus.RegionFilter:
        return bus.RegionFilter(
            id=parse_uuid("id", qp.id),
            country_id=parse_uuid("country_id", qp.country_id),
            name=qp.name or None,
            code=qp.code or None,
        )
