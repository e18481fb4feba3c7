"""Region endpoints."""

from src.ichor.api.http.routers.crud import crud_router
from src.ichor.application.geography import region as regionapp
from src.ichor.entities.geography.region import RegionService

router = crud_router(
    app_cls=regionapp.RegionApp,
    service_cls=RegionService,
    table="geography.regions",
    model=regionapp.Region,
    new_model=regionapp.NewRegion,
    update_model=regionapp.UpdateRegion,
    query_model=regionapp.RegionQueryParams,
)
