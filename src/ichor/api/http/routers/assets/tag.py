"""Tag endpoints."""

from src.ichor.api.http.routers.crud import crud_router
from src.ichor.application.assets import tag as tagapp
from src.ichor.entities.assets.tag import TagService

router = crud_router(
    app_cls=tagapp.TagApp,
    service_cls=TagService,
    table="assets.tags",
    model=tagapp.Tag,
    new_model=tagapp.NewTag,
    update_model=tagapp.UpdateTag,
    query_model=tagapp.TagQueryParams,
)
