"""Street endpoints."""

from src.ichor.api.http.routers.crud import crud_router
from src.ichor.application.geography import street as streetapp
from src.ichor.entities.geography.street import StreetService

router = crud_router(
    app_cls=streetapp.StreetApp,
    service_cls=StreetService,
    table="geography.streets",
    model=streetapp.Street,
    new_model=streetapp.NewStreet,
    update_model=streetapp.UpdateStreet,
    query_model=streetapp.StreetQueryParams,
)
