"""Application layer shared by CRUD domains.

Translates between request/response DTOs and business models, parses paging,
ordering and filter parameters, and converts business errors into
:class:`~src.ichor.core.sdk.errs.AppError` values with the right kind.
"""

from __future__ import annotations

import uuid
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from src.ichor.core.sdk import order, page
from src.ichor.core.sdk.crud import CrudService
from src.ichor.core.sdk.errors import (
    BusinessError,
    ForeignKeyViolationError,
    NotFoundError,
    UniqueEntryError,
)
from src.ichor.core.sdk.errs import AppError, ErrorKind, new_fields_error
from src.ichor.core.sdk.order import OrderBy
from src.ichor.core.sdk.params import FieldValueError, parse_uuid
from src.ichor.core.sdk.query import Result, new_result
from src.ichor.runtime.context import get_config

A = TypeVar("A", bound=BaseModel)
Q = TypeVar("Q", bound="QueryParams")


class QueryParams(BaseModel):
    """Paging and ordering parameters common to every list endpoint."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    page: str | None = None
    rows: str | None = None
    order_by: str | None = Field(default=None, alias="orderBy")


class QueryByIDsRequest(BaseModel):
    ids: list[str] = Field(default_factory=list)


class CrudApp(Generic[A, Q]):
    label: ClassVar[str]
    app_model: ClassVar[type[BaseModel]]
    new_model: ClassVar[type[BaseModel]]
    update_model: ClassVar[type[BaseModel]]
    order_by_fields: ClassVar[dict[str, str]]
    default_order_by: ClassVar[OrderBy]

    def __init__(self, service: CrudService) -> None:
        self.service = service

    # Translation hooks

    def to_app(self, entity: BaseModel) -> A:
        return self.app_model.model_validate(entity.model_dump())

    def to_bus_new(self, app_new: BaseModel) -> BaseModel:
        return self.new_model.model_validate(app_new.model_dump())

    def to_bus_update(self, app_upd: BaseModel) -> BaseModel:
        return self.update_model.model_validate(app_upd.model_dump(exclude_unset=True))

    def parse_filter(self, qp: Q) -> BaseModel:
        raise NotImplementedError

    # Operations

    def create(self, app_new: BaseModel) -> A:
        try:
            entity = self.service.create(self.to_bus_new(app_new))
        except BusinessError as e:
            raise self._translate("create", e) from e
        return self.to_app(entity)

    def update(self, entity_id: str, app_upd: BaseModel) -> A:
        entity = self._lookup(entity_id)
        try:
            updated = self.service.update(entity, self.to_bus_update(app_upd))
        except BusinessError as e:
            raise self._translate("update", e) from e
        return self.to_app(updated)

    def delete(self, entity_id: str) -> None:
        entity = self._lookup(entity_id)
        try:
            self.service.delete(entity)
        except BusinessError as e:
            raise self._translate("delete", e) from e

    def query(self, qp: Q) -> Result[A]:
        cfg = get_config().query
        try:
            pg = page.parse(
                qp.page, qp.rows, max_rows=cfg.max_rows, default_rows=cfg.default_rows
            )
        except ValueError as e:
            raise new_fields_error("page", e) from e

        try:
            flt = self.parse_filter(qp)
        except FieldValueError as e:
            raise new_fields_error(e.field, e) from e
        except ValueError as e:
            raise new_fields_error("filter", e) from e

        try:
            order_by = order.parse(self.order_by_fields, qp.order_by, self.default_order_by)
        except ValueError as e:
            raise new_fields_error("orderby", e) from e

        try:
            items = self.service.query(flt, order_by, pg)
            total = self.service.count(flt)
        except BusinessError as e:
            raise self._translate("query", e) from e

        return new_result([self.to_app(item) for item in items], total, pg)

    def query_by_id(self, entity_id: str) -> A:
        return self.to_app(self._lookup(entity_id))

    def query_by_ids(self, ids: list[str]) -> list[A]:
        try:
            parsed = [parse_uuid("ids", value) for value in ids]
        except FieldValueError as e:
            raise new_fields_error(e.field, e) from e
        try:
            entities = self.service.query_by_ids(parsed)
        except BusinessError as e:
            raise self._translate("querybyids", e) from e
        return [self.to_app(entity) for entity in entities]

    def query_all(self) -> list[A]:
        try:
            entities = self.service.query_all()
        except BusinessError as e:
            raise self._translate("queryall", e) from e
        return [self.to_app(entity) for entity in entities]

    # Helpers

    def _parse_id(self, entity_id: str) -> uuid.UUID:
        try:
            parsed = parse_uuid("id", entity_id)
        except FieldValueError as e:
            raise new_fields_error(e.field, e) from e
        if parsed is None:
            raise new_fields_error("id", "id is a required field")
        return parsed

    def _lookup(self, entity_id: str) -> Any:
        parsed = self._parse_id(entity_id)
        try:
            return self.service.query_by_id(parsed)
        except BusinessError as e:
            raise self._translate("querybyid", e) from e

    def _translate(self, op: str, err: BusinessError) -> AppError:
        if isinstance(err, NotFoundError):
            return AppError.new(ErrorKind.NOT_FOUND, err)
        if isinstance(err, UniqueEntryError):
            return AppError.new(ErrorKind.ALREADY_EXISTS, err)
        if isinstance(err, ForeignKeyViolationError):
            return AppError.new(ErrorKind.ABORTED, err)
        return AppError.newf(ErrorKind.INTERNAL, "%s: %s: %s", op, self.label, err)
