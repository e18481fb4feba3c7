"""Generic SQLModel implementation of the per-domain storer contract.

A domain store declares its row and business models, its error types and
the columns it may order by, and implements :meth:`SqlStore._apply_filter`.
Everything else (translation between rows and entities, paging, error
classification) lives here.
"""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from typing import Any, ClassVar, Generic, TypeVar

from loguru import logger
from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, select

from src.ichor.core.sdk import errors
from src.ichor.core.sdk.order import DESC, OrderBy
from src.ichor.core.sdk.page import Page
from src.ichor.core.services.database.sqldb import (
    DBDuplicatedEntryError,
    DBForeignKeyViolationError,
    DBNotFoundError,
    classify,
)

E = TypeVar("E", bound=BaseModel)
F = TypeVar("F", bound=BaseModel)


def contains(column: Any, value: str) -> Any:
    """Case-insensitive substring match."""
    return column.ilike(f"%{value}%")


class SqlStore(Generic[E, F]):
    table: ClassVar[type[SQLModel]]
    entity: ClassVar[type[BaseModel]]
    order_columns: ClassVar[dict[str, str]]
    default_order: ClassVar[OrderBy | None] = None

    not_found_error: ClassVar[type[errors.NotFoundError]] = errors.NotFoundError
    unique_error: ClassVar[type[errors.UniqueEntryError]] = errors.UniqueEntryError
    foreign_key_error: ClassVar[type[errors.ForeignKeyViolationError]] = (
        errors.ForeignKeyViolationError
    )

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def with_session(self, session: Session) -> SqlStore[E, F]:
        """Return a store bound to ``session`` so it joins that transaction."""
        return type(self)(session)

    # Row translation

    def to_row(self, entity: E) -> SQLModel:
        return self.table.model_validate(entity.model_dump())

    def to_entity(self, row: SQLModel) -> E:
        return self.entity.model_validate(row, from_attributes=True)

    # Writes

    def create(self, entity: E) -> None:
        self._session.add(self.to_row(entity))
        self._flush(f"create: {entity.id}")

    def update(self, entity: E) -> None:
        row = self._get_row(entity.id)
        for name, value in self.to_row(entity).model_dump().items():
            setattr(row, name, value)
        self._session.add(row)
        self._flush(f"update: {entity.id}")

    def delete(self, entity: E) -> None:
        row = self._get_row(entity.id)
        self._session.delete(row)
        self._flush(f"delete: {entity.id}")

    def _flush(self, context: str) -> None:
        try:
            self._session.flush()
        except IntegrityError as e:
            # A failed flush leaves the session unusable until rolled back.
            self._session.rollback()
            db_err = classify(e)
            logger.debug("{} {}: {}", self.table.__tablename__, context, db_err)
            if isinstance(db_err, DBDuplicatedEntryError):
                raise self.unique_error() from db_err
            if isinstance(db_err, DBForeignKeyViolationError):
                raise self.foreign_key_error() from db_err
            raise

    # Reads

    def _get_row(self, entity_id: uuid.UUID) -> SQLModel:
        row = self._session.get(self.table, entity_id)
        if row is None:
            raise self.not_found_error() from DBNotFoundError(str(entity_id))
        return row

    def _apply_filter(self, stmt: Any, flt: F) -> Any:
        """Add WHERE clauses for every populated filter field."""
        return stmt

    def _order_clause(self, order_by: OrderBy) -> list[Any]:
        column = getattr(self.table, self.order_columns[order_by.field])
        primary = column.desc() if order_by.direction == DESC else column.asc()
        # Deterministic paging when the ordered column has duplicates.
        return [primary, self.table.id.asc()]

    def query(self, flt: F, order_by: OrderBy, page: Page) -> list[E]:
        stmt = self._apply_filter(select(self.table), flt)
        stmt = (
            stmt.order_by(*self._order_clause(order_by))
            .offset(page.offset)
            .limit(page.rows_per_page)
        )
        return [self.to_entity(row) for row in self._session.exec(stmt).all()]

    def count(self, flt: F) -> int:
        stmt = self._apply_filter(select(func.count()).select_from(self.table), flt)
        return self._session.exec(stmt).one()

    def query_by_id(self, entity_id: uuid.UUID) -> E:
        return self.to_entity(self._get_row(entity_id))

    def query_by_ids(self, ids: Sequence[uuid.UUID]) -> list[E]:
        if not ids:
            return []
        stmt = select(self.table).where(self.table.id.in_(list(ids)))
        if self.default_order is not None:
            stmt = stmt.order_by(*self._order_clause(self.default_order))
        return [self.to_entity(row) for row in self._session.exec(stmt).all()]

    def query_all(self) -> list[E]:
        stmt = select(self.table)
        if self.default_order is not None:
            stmt = stmt.order_by(*self._order_clause(self.default_order))
        return [self.to_entity(row) for row in self._session.exec(stmt).all()]

    def _query_one(self, *criteria: Any) -> E:
        row = self._session.exec(select(self.table).where(*criteria)).first()
        if row is None:
            raise self.not_found_error() from DBNotFoundError()
        return self.to_entity(row)
