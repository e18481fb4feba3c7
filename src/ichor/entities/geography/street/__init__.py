"""Entity package: Street."""

from .entity import (
    DOMAIN_NAME,
    NewStreet,
    Street,
    StreetFilter,
    StreetForeignKeyError,
    StreetNotFoundError,
    UpdateStreet,
)
from .repository import StreetRepository
from .service import StreetService
from .table import StreetTable

__all__ = [
    "DOMAIN_NAME",
    "NewStreet",
    "Street",
    "StreetFilter",
    "StreetForeignKeyError",
    "StreetNotFoundError",
    "StreetRepository",
    "StreetService",
    "StreetTable",
    "UpdateStreet",
]
