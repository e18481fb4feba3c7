"""Entity package: Currency."""

from .cache import CachedCurrencyRepository, new_currency_cache
from .entity import (
    DOMAIN_NAME,
    Currency,
    CurrencyFilter,
    CurrencyNotFoundError,
    CurrencyUniqueError,
    NewCurrency,
    UpdateCurrency,
)
from .repository import CurrencyRepository
from .service import CurrencyService
from .table import CurrencyTable

__all__ = [
    "DOMAIN_NAME",
    "CachedCurrencyRepository",
    "Currency",
    "CurrencyFilter",
    "CurrencyNotFoundError",
    "CurrencyRepository",
    "CurrencyService",
    "CurrencyTable",
    "CurrencyUniqueError",
    "NewCurrency",
    "UpdateCurrency",
    "new_currency_cache",
]
