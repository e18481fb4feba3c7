from datetime import datetime

from src.ichor.core.sdk.crud import CrudService
from src.ichor.entities.geography.country.entity import (
    DOMAIN_NAME,
    Country,
    CountryFilter,
    NewCountry,
    UpdateCountry,
)


class CountryService(CrudService[Country, NewCountry, UpdateCountry, CountryFilter]):
    domain = DOMAIN_NAME
    entity = Country

    def _build(self, new: NewCountry, now: datetime) -> Country:
        country = super()._build(new, now)
        country.alpha_2 = country.alpha_2.upper()
        country.alpha_3 = country.alpha_3.upper()
        return country
