"""Office endpoints."""

from src.ichor.api.http.routers.crud import crud_router
from src.ichor.application.hr import office as officeapp
from src.ichor.entities.hr.office import OfficeService

router = crud_router(
    app_cls=officeapp.OfficeApp,
    service_cls=OfficeService,
    table="hr.offices",
    model=officeapp.Office,
    new_model=officeapp.NewOffice,
    update_model=officeapp.UpdateOffice,
    query_model=officeapp.OfficeQueryParams,
)
