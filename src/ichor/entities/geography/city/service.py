from src.ichor.core.sdk.crud import CrudService
from src.ichor.entities.geography.city.entity import (
    DOMAIN_NAME,
    City,
    CityFilter,
    NewCity,
    UpdateCity,
)


class CityService(CrudService[City, NewCity, UpdateCity, CityFilter]):
    domain = DOMAIN_NAME
    entity = City
