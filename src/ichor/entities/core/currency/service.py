from src.ichor.core.sdk.crud import CrudService
from src.ichor.entities.core.currency.entity import (
    DOMAIN_NAME,
    Currency,
    CurrencyFilter,
    NewCurrency,
    UpdateCurrency,
)


class CurrencyService(CrudService[Currency, NewCurrency, UpdateCurrency, CurrencyFilter]):
    """Business API for currencies."""

    domain = DOMAIN_NAME
    entity = Currency

    def query_by_code(self, code: str) -> Currency:
        return self.storer.query_by_code(code)
