"""Application layer: users.

Passwords travel in on create/update (with a confirmation field) and never
travel out; responses carry everything except the hash.
"""

import uuid
from datetime import date

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator

from src.ichor.core.sdk.crudapp import CrudApp, QueryParams
from src.ichor.core.sdk.errors import BusinessError
from src.ichor.core.sdk.params import parse_bool, parse_datetime, parse_uuid
from src.ichor.entities._base import UTCDateTime
from src.ichor.entities.core import user as bus

ORDER_BY_FIELDS = {
    "id": bus.entity.ORDER_BY_ID,
    "username": bus.entity.ORDER_BY_USERNAME,
    "first_name": bus.entity.ORDER_BY_FIRST_NAME,
    "last_name": bus.entity.ORDER_BY_LAST_NAME,
    "email": bus.entity.ORDER_BY_EMAIL,
    "enabled": bus.entity.ORDER_BY_ENABLED,
    "date_hired": bus.entity.ORDER_BY_DATE_HIRED,
    "created_date": bus.entity.ORDER_BY_CREATED_DATE,
}


class User(BaseModel):
    id: uuid.UUID
    username: str
    first_name: str
    last_name: str
    email: str
    roles: list[str]
    enabled: bool
    office_id: uuid.UUID | None
    birthday: date | None
    date_hired: date | None
    created_date: UTCDateTime
    updated_date: UTCDateTime


class NewUser(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    roles: list[bus.Role] = Field(min_length=1)
    password: str = Field(min_length=8, repr=False)
    password_confirm: str = Field(repr=False)
    enabled: bool = True
    office_id: uuid.UUID | None = None
    birthday: date | None = None
    date_hired: date | None = None

    @model_validator(mode="after")
    def _passwords_match(self):
        if self.password != self.password_confirm:
            raise ValueError("passwords do not match")
        return self


class UpdateUser(BaseModel):
    model_config = ConfigDict(extra="forbid")

    username: str | None = Field(default=None, min_length=3, max_length=50)
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=8, repr=False)
    password_confirm: str | None = Field(default=None, repr=False)
    enabled: bool | None = None
    office_id: uuid.UUID | None = None
    birthday: date | None = None
    date_hired: date | None = None

    @model_validator(mode="after")
    def _passwords_match(self):
        if self.password is not None and self.password != self.password_confirm:
            raise ValueError("passwords do not match")
        return self


class UpdateUserRole(BaseModel):
    roles: list[bus.Role] = Field(min_length=1)


class UserQueryParams(QueryParams):
    id: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    enabled: str | None = None
    office_id: str | None = None
    start_created_date: str | None = None
    end_created_date: str | None = None


class UserApp(CrudApp[User, UserQueryParams]):
    label = "user"
    app_model = User
    new_model = bus.NewUser
    update_model = bus.UpdateUser
    order_by_fields = ORDER_BY_FIELDS
    default_order_by = bus.entity.DEFAULT_ORDER_BY

    def to_bus_new(self, app_new: NewUser) -> bus.NewUser:
        return bus.NewUser.model_validate(app_new.model_dump(exclude={"password_confirm"}))

    def to_bus_update(self, app_upd: UpdateUser) -> bus.UpdateUser:
        return bus.UpdateUser.model_validate(
            app_upd.model_dump(exclude_unset=True, exclude={"password_confirm"})
        )

    def update_roles(self, entity_id: str, app_upd: UpdateUserRole) -> User:
        user = self._lookup(entity_id)
        try:
            updated = self.service.update_roles(
                user, bus.UpdateUserRole.model_validate(app_upd.model_dump())
            )
        except BusinessError as e:
            raise self._translate("updaterole", e) from e
        return self.to_app(updated)

    def parse_filter(self, qp: UserQueryParams) -> bus.UserFilter:
        return bus.UserFilter(
            id=parse_uuid("id", qp.id),
            username=qp.username or None,
            first_name=qp.first_name or None,
            last_name=qp.last_name or None,
            email=qp.email or None,
            enabled=parse_bool("enabled", qp.enabled),
            office_id=parse_uuid("office_id", qp.office_id),
            start_created_date=parse_datetime("start_created_date", qp.start_created_date),
            end_created_date=parse_datetime("end_created_date", qp.end_created_date),
        )
