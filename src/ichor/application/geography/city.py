"""Application layer: cities."""

import uuid

from pydantic import BaseModel, Field

from src.ichor.core.sdk.crudapp import CrudApp, QueryParams
from src.ichor.core.sdk.params import parse_uuid
from src.ichor.entities.geography import city as bus

ORDER_BY_FIELDS = {
    "id": bus.entity.ORDER_BY_ID,
    "region_id": bus.entity.ORDER_BY_REGION_ID,
    "name": bus.entity.ORDER_BY_NAME,
}


class City(BaseModel):
    id: uuid.UUID
    region_id: uuid.UUID
    name: str


class NewCity(BaseModel):
    region_id: uuid.UUID
    name: str = Field(min_length=1, max_length=100)


class UpdateCity(BaseModel):
    region_id: uuid.UUID | None = None
    name: str | None = Field(default=None, min_length=1, max_length=100)


class CityQueryParams(QueryParams):
    id: str | None = None
    region_id: str | None = None
    name: str | None = None


class CityApp(CrudApp[City, CityQueryParams]):
    label = "city"
    app_model = City
    new_model = bus.NewCity
    update_model = bus.UpdateCity
    order_by_fields = ORDER_BY_FIELDS
    default_order_by = bus.entity.DEFAULT_ORDER_BY

    def parse_filter(self, qp: CityQueryParams) -> bus.CityFilter:
        return bus.CityFilter(
            id=parse_uuid("id", qp.id),
            region_id=parse_uuid("region_id", qp.region_id),
            name=qp.name or None,
        )
