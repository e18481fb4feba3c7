"""Parsing helpers for string query parameters.

Every helper returns ``None`` for an absent or empty value and raises
:class:`FieldValueError` naming the offending parameter otherwise.
"""

from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from src.ichor.core.sdk.clock import as_utc


class FieldValueError(ValueError):
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


def parse_uuid(field: str, value: str | None) -> uuid.UUID | None:
    if not value:
        return None
    try:
        return uuid.UUID(value)
    except ValueError as e:
        raise FieldValueError(field, f"invalid UUID length: {len(value)}") from e


def parse_int(field: str, value: str | None) -> int | None:
    if not value:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise FieldValueError(field, f"invalid syntax: {value!r}") from e


def parse_bool(field: str, value: str | None) -> bool | None:
    if not value:
        return None
    lowered = value.lower()
    if lowered in ("1", "t", "true"):
        return True
    if lowered in ("0", "f", "false"):
        return False
    raise FieldValueError(field, f"invalid syntax: {value!r}")


def parse_decimal(field: str, value: str | None) -> Decimal | None:
    if not value:
        return None
    try:
        return Decimal(value)
    except InvalidOperation as e:
        raise FieldValueError(field, f"invalid syntax: {value!r}") from e


def parse_datetime(field: str, value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return as_utc(datetime.fromisoformat(value))
    except ValueError as e:
        raise FieldValueError(field, f"cannot parse {value!r} as RFC3339 time") from e


def parse_date(field: str, value: str | None) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise FieldValueError(field, f"cannot parse {value!r} as date") from e


def parse_choice(field: str, value: str | None, choices: tuple[str, ...]) -> str | None:
    if not value:
        return None
    if value not in choices:
        raise FieldValueError(field, f"must be one of [{' '.join(choices)}]")
    return value
