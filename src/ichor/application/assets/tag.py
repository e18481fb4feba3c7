"""Application layer: tags."""

import uuid

from pydantic import BaseModel, Field

from src.ichor.core.sdk.crudapp import CrudApp, QueryParams
from src.ichor.core.sdk.params import parse_uuid
from src.ichor.entities.assets import tag as bus

ORDER_BY_FIELDS = {
    "id": bus.entity.ORDER_BY_ID,
    "name": bus.entity.ORDER_BY_NAME,
    "description": bus.entity.ORDER_BY_DESCRIPTION,
}


class Tag(BaseModel):
    id: uuid.UUID
    name: str
    description: str


class NewTag(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=500)


class UpdateTag(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)


class TagQueryParams(QueryParams):
    id: str | None = None
    name: str | None = None
    description: str | None = None


class TagApp(CrudApp[Tag, TagQueryParams]):
    label = "tag"
    app_model = Tag
    new_model = bus.NewTag
    update_model = bus.UpdateTag
    order_by_fields = ORDER_BY_FIELDS
    default_order_by = bus.entity.DEFAULT_ORDER_BY

    def parse_filter(self, qp: TagQueryParams) -> bus.TagFilter:
        return bus.TagFilter(
            id=parse_uuid("id", qp.id),
            name=qp.name or None,
            description=qp.description or None,
        )
