"""Entity: Country."""

import uuid

from pydantic import BaseModel

from src.ichor.core.sdk.errors import NotFoundError, UniqueEntryError
from src.ichor.core.sdk.order import ASC, OrderBy
from src.ichor.entities._base import Entity

DOMAIN_NAME = "country"

ORDER_BY_ID = "id"
ORDER_BY_NUMBER = "number"
ORDER_BY_NAME = "name"
ORDER_BY_ALPHA_2 = "alpha_2"
ORDER_BY_ALPHA_3 = "alpha_3"

DEFAULT_ORDER_BY = OrderBy.new(ORDER_BY_NUMBER, ASC)


class CountryNotFoundError(NotFoundError):
    def __init__(self, message: str = "country not found"):
        super().__init__(message)


class CountryUniqueError(UniqueEntryError):
    def __init__(self, message: str = "country entry is not unique"):
        super().__init__(message)


class Country(Entity):
    """ISO 3166 country."""

    number: int
    name: str
    alpha_2: str
    alpha_3: str


class NewCountry(BaseModel):
    number: int
    name: str
    alpha_2: str
    alpha_3: str


class UpdateCountry(BaseModel):
    number: int | None = None
    name: str | None = None
    alpha_2: str | None = None
    alpha_3: str | None = None


class CountryFilter(BaseModel):
    id: uuid.UUID | None = None
    number: int | None = None
    name: str | None = None
    alpha_2: str | None = None
    alpha_3: str | None = None
