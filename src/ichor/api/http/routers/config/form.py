"""Form endpoints."""

from src.ichor.api.http.routers.crud import crud_router
from src.ichor.application.config import form as formapp
from src.ichor.entities.config.form import FormService

router = crud_router(
    app_cls=formapp.FormApp,
    service_cls=FormService,
    table="config.forms",
    model=formapp.Form,
    new_model=formapp.NewForm,
    update_model=formapp.UpdateForm,
    query_model=formapp.FormQueryParams,
)
