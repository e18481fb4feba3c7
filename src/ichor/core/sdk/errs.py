"""Application error model shared by the app layer and the HTTP handlers.

Every failure that reaches a client is an :class:`AppError` carrying one of
the closed set of :class:`ErrorKind` values. The kind decides the HTTP status
and is rendered as ``{"code": ..., "message": ...}``.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    OK = "ok"
    INVALID_ARGUMENT = "invalid_argument"
    UNAUTHENTICATED = "unauthenticated"
    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    ABORTED = "aborted"
    FAILED_PRECONDITION = "failed_precondition"
    INTERNAL = "internal"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    ErrorKind.OK: 200,
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.PERMISSION_DENIED: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.ALREADY_EXISTS: 409,
    ErrorKind.ABORTED: 409,
    ErrorKind.FAILED_PRECONDITION: 400,
    ErrorKind.INTERNAL: 500,
}


class AppError(Exception):
    """Error returned to API clients."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @classmethod
    def new(cls, kind: ErrorKind, err: BaseException | str) -> AppError:
        return cls(kind, str(err))

    @classmethod
    def newf(cls, kind: ErrorKind, fmt: str, *args: Any) -> AppError:
        return cls(kind, fmt % args if args else fmt)

    @property
    def http_status(self) -> int:
        return self.kind.http_status

    def to_dict(self) -> dict[str, str]:
        return {"code": self.kind.value, "message": self.message}

    def __repr__(self) -> str:
        return f"AppError(kind={self.kind.value!r}, message={self.message!r})"


class FieldError:
    """A validation failure attached to a single request field."""

    __slots__ = ("field", "error")

    def __init__(self, field: str, error: str):
        self.field = field
        self.error = error

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "error": self.error}

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, FieldError)
            and self.field == other.field
            and self.error == other.error
        )

    def __repr__(self) -> str:
        return f"FieldError({self.field!r}, {self.error!r})"


class FieldErrors(list):
    """Collection of :class:`FieldError` rendered as one invalid-argument error."""

    def add(self, field: str, err: BaseException | str) -> None:
        self.append(FieldError(field, str(err)))

    def to_json(self) -> str:
        return json.dumps([fe.to_dict() for fe in self], separators=(",", ":"))

    def to_error(self) -> AppError:
        return AppError(ErrorKind.INVALID_ARGUMENT, f"validate: {self.to_json()}")


def new_fields_error(field: str, err: BaseException | str) -> AppError:
    errors = FieldErrors()
    errors.add(field, err)
    return errors.to_error()


def is_app_error(exc: BaseException) -> bool:
    return isinstance(exc, AppError)
