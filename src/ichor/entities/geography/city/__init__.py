"""Entity package: City."""

from .entity import (
    DOMAIN_NAME,
    City,
    CityFilter,
    CityForeignKeyError,
    CityNotFoundError,
    CityUniqueError,
    NewCity,
    UpdateCity,
)
from .repository import CityRepository
from .service import CityService
from .table import CityTable

__all__ = [
    "DOMAIN_NAME",
    "City",
    "CityFilter",
    "CityForeignKeyError",
    "CityNotFoundError",
    "CityRepository",
    "CityService",
    "CityTable",
    "CityUniqueError",
    "NewCity",
    "UpdateCity",
]
