"""Business-layer building blocks shared by every CRUD domain.

A domain service subclasses :class:`CrudService`, names its domain and
business model, and gets the standard create/update/delete/query workflow:
identifiers and audit timestamps on create, field-wise partial updates,
and a delegate event after each successful write.
"""

from __future__ import annotations

import copy
import uuid
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta
from typing import Any, ClassVar, Generic, Protocol, TypeVar, get_args

from loguru import logger
from pydantic import BaseModel
from sqlmodel import Session

from src.ichor.core.sdk import delegate
from src.ichor.core.sdk.clock import utcnow
from src.ichor.core.sdk.delegate import Delegate, DelegateData, DelegateError
from src.ichor.core.sdk.order import OrderBy
from src.ichor.core.sdk.page import Page

E = TypeVar("E", bound=BaseModel)
N = TypeVar("N", bound=BaseModel)
U = TypeVar("U", bound=BaseModel)
F = TypeVar("F", bound=BaseModel)


def _nullable(model: type[BaseModel], name: str) -> bool:
    field = model.model_fields.get(name)
    return field is not None and type(None) in get_args(field.annotation)


def explicit_changes(
    model: type[BaseModel], upd: BaseModel, exclude: set[str] | None = None
) -> dict[str, Any]:
    """Fields explicitly set on ``upd``.

    Unset fields are left alone. An explicit ``None`` clears a nullable
    field of ``model`` and is ignored for a required one.
    """
    return {
        name: value
        for name, value in upd.model_dump(exclude_unset=True, exclude=exclude).items()
        if value is not None or _nullable(model, name)
    }


class Storer(Protocol[E, F]):
    """Persistence contract a business service depends on."""

    def with_session(self, session: Session) -> Storer[E, F]: ...

    def create(self, entity: E) -> None: ...

    def update(self, entity: E) -> None: ...

    def delete(self, entity: E) -> None: ...

    def query(self, flt: F, order_by: OrderBy, page: Page) -> list[E]: ...

    def count(self, flt: F) -> int: ...

    def query_by_id(self, entity_id: uuid.UUID) -> E: ...

    def query_by_ids(self, ids: Sequence[uuid.UUID]) -> list[E]: ...

    def query_all(self) -> list[E]: ...


class CrudService(Generic[E, N, U, F]):
    domain: ClassVar[str]
    entity: ClassVar[type[BaseModel]]

    def __init__(
        self,
        storer: Storer[E, F],
        delegate: Delegate | None = None,
        now: Callable[[], datetime] = utcnow,
    ) -> None:
        self._storer = storer
        self._delegate = delegate
        self._now = now

    @property
    def storer(self) -> Storer[E, F]:
        return self._storer

    def with_session(self, session: Session) -> CrudService[E, N, U, F]:
        """Return a copy whose storer participates in ``session``'s transaction."""
        clone = copy.copy(self)
        clone._storer = self._storer.with_session(session)
        return clone

    # Writes

    def create(self, new: N) -> E:
        entity = self._build(new, self._now())
        self._storer.create(entity)
        self._notify(delegate.created_data(self.domain, entity))
        return entity

    def update(self, entity: E, upd: U) -> E:
        changes = self._changes(entity, upd)
        fields = self.entity.model_fields
        if "updated_date" in fields:
            changes["updated_date"] = self._advance(entity.updated_date)

        updated = entity.model_copy(update=changes)
        self._storer.update(updated)
        self._notify(delegate.updated_data(self.domain, entity, updated))
        return updated

    def delete(self, entity: E) -> None:
        self._storer.delete(entity)
        self._notify(delegate.deleted_data(self.domain, entity))

    # Reads

    def query(self, flt: F, order_by: OrderBy, page: Page) -> list[E]:
        return self._storer.query(flt, order_by, page)

    def count(self, flt: F) -> int:
        return self._storer.count(flt)

    def query_by_id(self, entity_id: uuid.UUID) -> E:
        return self._storer.query_by_id(entity_id)

    def query_by_ids(self, ids: Sequence[uuid.UUID]) -> list[E]:
        return self._storer.query_by_ids(ids)

    def query_all(self) -> list[E]:
        return self._storer.query_all()

    # Hooks

    def _build(self, new: N, now: datetime) -> E:
        """Turn a creation request into a full entity.

        Audit columns are filled in when the business model has them;
        ``updated_by`` starts out as ``created_by``.
        """
        data: dict[str, Any] = new.model_dump()
        fields = self.entity.model_fields
        if "created_date" in fields:
            data.setdefault("created_date", now)
        if "updated_date" in fields:
            data.setdefault("updated_date", now)
        if "updated_by" in fields and data.get("updated_by") is None:
            data["updated_by"] = data.get("created_by")
        return self.entity(id=uuid.uuid4(), **data)

    def _changes(self, entity: E, upd: U) -> dict[str, Any]:
        return explicit_changes(self.entity, upd)

    def _advance(self, previous: datetime) -> datetime:
        now = self._now()
        if now <= previous:
            now = previous + timedelta(microseconds=1)
        return now

    def _notify(self, data: DelegateData) -> None:
        if self._delegate is None:
            return
        try:
            self._delegate.call(data)
        except DelegateError as e:
            logger.bind(domain=data.domain, action=data.action).error(
                "delegate call failed: {}", e
            )
