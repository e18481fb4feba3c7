"""Entity package: Office."""

from .entity import (
    DOMAIN_NAME,
    NewOffice,
    Office,
    OfficeFilter,
    OfficeForeignKeyError,
    OfficeNotFoundError,
    OfficeUniqueError,
    UpdateOffice,
)
from .repository import OfficeRepository
from .service import OfficeService
from .table import OfficeTable

__all__ = [
    "DOMAIN_NAME",
    "NewOffice",
    "Office",
    "OfficeFilter",
    "OfficeForeignKeyError",
    "OfficeNotFoundError",
    "OfficeRepository",
    "OfficeService",
    "OfficeTable",
    "OfficeUniqueError",
    "UpdateOffice",
]
