"""Application layer: forms."""

import uuid

from pydantic import BaseModel, Field

from src.ichor.core.sdk.crudapp import CrudApp, QueryParams
from src.ichor.core.sdk.params import parse_bool, parse_uuid
from src.ichor.entities.config import form as bus

ORDER_BY_FIELDS = {
    "id": bus.entity.ORDER_BY_ID,
    "name": bus.entity.ORDER_BY_NAME,
    "is_reference_data": bus.entity.ORDER_BY_IS_REFERENCE_DATA,
}


class Form(BaseModel):
    id: uuid.UUID
    name: str
    is_reference_data: bool
    allow_inline_create: bool


class NewForm(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    is_reference_data: bool = False
    allow_inline_create: bool = False


class UpdateForm(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    is_reference_data: bool | None = None
    allow_inline_create: bool | None = None


class FormQueryParams(QueryParams):
    id: str | None = None
    name: str | None = None
    is_reference_data: str | None = None


class FormApp(CrudApp[Form, FormQueryParams]):
    label = "form"
    app_model = Form
    new_model = bus.NewForm
    update_model = bus.UpdateForm
    order_by_fields = ORDER_BY_FIELDS
    default_order_by = bus.entity.DEFAULT_ORDER_BY

    def parse_filter(self, qp: FormQueryParams) -> bus.FormFilter:
        return bus.FormFilter(
            id=parse_uuid("id", qp.id),
            name=qp.name or None,
            is_reference_data=parse_bool("is_reference_data", qp.is_reference_data),
        )
