"""Tests for application errors and request validation messages."""

import json

import pytest
from pydantic import BaseModel, Field, ValidationError

from src.ichor.api.http.errors import field_errors
from src.ichor.core.sdk.errs import (
    AppError,
    ErrorKind,
    FieldErrors,
    is_app_error,
    new_fields_error,
)


class _Payload(BaseModel):
    code: str = Field(min_length=3, max_length=3)
    decimal_places: int = Field(ge=0, le=8)


class TestAppError:
    @pytest.mark.parametrize(
        ("kind", "status"),
        [
            (ErrorKind.INVALID_ARGUMENT, 400),
            (ErrorKind.UNAUTHENTICATED, 401),
            (ErrorKind.PERMISSION_DENIED, 403),
            (ErrorKind.NOT_FOUND, 404),
            (ErrorKind.ALREADY_EXISTS, 409),
            (ErrorKind.ABORTED, 409),
            (ErrorKind.INTERNAL, 500),
        ],
    )
    def test_http_status(self, kind, status):
        assert AppError(kind, "boom").http_status == status

    def test_to_dict(self):
        err = AppError.new(ErrorKind.NOT_FOUND, ValueError("currency not found"))
        assert err.to_dict() == {"code": "not_found", "message": "currency not found"}
        assert is_app_error(err)
        assert not is_app_error(ValueError())

    def test_newf_formats(self):
        err = AppError.newf(ErrorKind.INTERNAL, "%s: %s", "create", "currency")
        assert err.message == "create: currency"


class TestFieldErrors:
    def test_single_field_error_message(self):
        """A field error renders as ``validate: [{field, error}]``."""
        err = new_fields_error("page", "page value too small, must be larger than 0")
        assert err.kind is ErrorKind.INVALID_ARGUMENT
        assert err.message == (
            'validate: [{"field":"page","error":"page value too small, must be larger than 0"}]'
        )

    def test_collects_multiple(self):
        errors = FieldErrors()
        errors.add("name", "name is a required field")
        errors.add("code", ValueError("too long"))
        payload = json.loads(errors.to_error().message.removeprefix("validate: "))
        assert payload == [
            {"field": "name", "error": "name is a required field"},
            {"field": "code", "error": "too long"},
        ]


class TestValidationTranslation:
    """Pydantic errors become client-facing field messages."""

    def _errors(self, data: dict) -> FieldErrors:
        with pytest.raises(ValidationError) as exc:
            _Payload.model_validate(data)
        return field_errors(list(exc.value.errors()))

    def test_missing_field(self):
        errors = self._errors({"decimal_places": 2})
        assert [e.to_dict() for e in errors] == [
            {"field": "code", "error": "code is a required field"}
        ]

    def test_length_and_range(self):
        errors = {e.field: e.error for e in self._errors({"code": "US", "decimal_places": 9})}
        assert errors["code"] == "code must be at least 3 characters in length"
        assert errors["decimal_places"] == "decimal_places must be 8 or less"

    def test_request_locations_are_stripped(self):
        errors = field_errors(
            [{"type": "missing", "loc": ("body", "name"), "msg": "Field required"}]
        )
        assert errors[0].field == "name"
