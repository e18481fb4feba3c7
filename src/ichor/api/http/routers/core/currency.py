"""Currency endpoints."""

from src.ichor.api.http.routers.crud import crud_router
from src.ichor.application.core import currency as currencyapp
from src.ichor.entities.core.currency import CurrencyService

router = crud_router(
    app_cls=currencyapp.CurrencyApp,
    service_cls=CurrencyService,
    table="core.currencies",
    model=currencyapp.Currency,
    new_model=currencyapp.NewCurrency,
    update_model=currencyapp.UpdateCurrency,
    query_model=currencyapp.CurrencyQueryParams,
    include_all=True,
)
