"""Country endpoints."""

from src.ichor.api.http.routers.crud import crud_router
from src.ichor.application.geography import country as countryapp
from src.ichor.entities.geography.country import CountryService

router = crud_router(
    app_cls=countryapp.CountryApp,
    service_cls=CountryService,
    table="geography.countries",
    model=countryapp.Country,
    new_model=countryapp.NewCountry,
    update_model=countryapp.UpdateCountry,
    query_model=countryapp.CountryQueryParams,
)
