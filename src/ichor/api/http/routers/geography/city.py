"""City endpoints."""

from src.ichor.api.http.routers.crud import crud_router
from src.ichor.application.geography import city as cityapp
from src.ichor.entities.geography.city import CityService

router = crud_router(
    app_cls=cityapp.CityApp,
    service_cls=CityService,
    table="geography.cities",
    model=cityapp.City,
    new_model=cityapp.NewCity,
    update_model=cityapp.UpdateCity,
    query_model=cityapp.CityQueryParams,
)
