"""Entity package: Country."""

from .entity import (
    DOMAIN_NAME,
    Country,
    CountryFilter,
    CountryNotFoundError,
    CountryUniqueError,
    NewCountry,
    UpdateCountry,
)
from .repository import CountryRepository
from .service import CountryService
from .table import CountryTable

__all__ = [
    "DOMAIN_NAME",
    "Country",
    "CountryFilter",
    "CountryNotFoundError",
    "CountryRepository",
    "CountryService",
    "CountryTable",
    "CountryUniqueError",
    "NewCountry",
    "UpdateCountry",
]
