"""Application layer: countries."""

import uuid

from pydantic import BaseModel, Field

from src.ichor.core.sdk.crudapp import CrudApp, QueryParams
from src.ichor.core.sdk.params import parse_int, parse_uuid
from src.ichor.entities.geography import country as bus

ORDER_BY_FIELDS = {
    "id": bus.entity.ORDER_BY_ID,
    "number": bus.entity.ORDER_BY_NUMBER,
    "name": bus.entity.ORDER_BY_NAME,
    "alpha_2": bus.entity.ORDER_BY_ALPHA_2,
    "alpha_3": bus.entity.ORDER_BY_ALPHA_3,
}


class Country(BaseModel):
    id: uuid.UUID
    number: int
    name: str
    alpha_2: str
    alpha_3: str


class NewCountry(BaseModel):
    number: int = Field(ge=1, le=999)
    name: str = Field(min_length=1, max_length=100)
    alpha_2: str = Field(min_length=2, max_length=2)
    alpha_3: str = Field(min_length=3, max_length=3)


class UpdateCountry(BaseModel):
    number: int | None = Field(default=None, ge=1, le=999)
    name: str | None = Field(default=None, min_length=1, max_length=100)
    alpha_2: str | None = Field(default=None, min_length=2, max_length=2)
    alpha_3: str | None = Field(default=None, min_length=3, max_length=3)


class CountryQueryParams(QueryParams):
    id: str | None = None
    number: str | None = None
    name: str | None = None
    alpha_2: str | None = None
    alpha_3: str | None = None


class CountryApp(CrudApp[Country, CountryQueryParams]):
    label = "country"
    app_model = Country
    new_model = bus.NewCountry
    update_model = bus.UpdateCountry
    order_by_fields = ORDER_BY_FIELDS
    default_order_by = bus.entity.DEFAULT_ORDER_BY

    def parse_filter(self, qp: CountryQueryParams) -> bus.CountryFilter:
        return bus.CountryFilter(
            id=parse_uuid("id", qp.id),
            number=parse_int("number", qp.number),
            name=qp.name or None,
            alpha_2=qp.alpha_2 or None,
            alpha_3=qp.alpha_3 or None,
        )
