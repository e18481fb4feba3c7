"""Exception handlers rendering every failure as ``{"code", "message"}``."""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.responses import JSONResponse

from src.ichor.core.sdk.errs import AppError, FieldErrors

_LOCATIONS = {"body", "query", "path", "header"}

_MESSAGES = {
    "missing": "{field} is a required field",
    "string_too_short": "{field} must be at least {min_length} characters in length",
    "string_too_long": "{field} must be a maximum of {max_length} characters in length",
    "too_short": "{field} must contain at least {min_length} items",
    "uuid_parsing": "{field} must be a valid version 4 UUID",
    "uuid_type": "{field} must be a valid version 4 UUID",
    "uuid_version": "{field} must be a valid version 4 UUID",
    "greater_than_equal": "{field} must be {ge} or greater",
    "greater_than": "{field} must be greater than {gt}",
    "less_than_equal": "{field} must be {le} or less",
    "less_than": "{field} must be less than {lt}",
    "literal_error": "{field} must be one of {expected}",
    "int_parsing": "{field} must be a valid numeric value",
    "int_from_float": "{field} must be a valid numeric value",
    "decimal_parsing": "{field} must be a valid numeric value",
    "float_parsing": "{field} must be a valid numeric value",
    "bool_parsing": "{field} must be a valid boolean value",
    "datetime_from_date_parsing": "{field} must be a valid RFC3339 timestamp",
    "datetime_parsing": "{field} must be a valid RFC3339 timestamp",
    "date_from_datetime_parsing": "{field} must be a valid date",
    "date_parsing": "{field} must be a valid date",
    "value_error": "{field} {error}",
    "extra_forbidden": "{field} is not an allowed field",
}


def _field_name(loc: tuple[Any, ...]) -> str:
    parts = [str(part) for part in loc if part not in _LOCATIONS]
    return ".".join(parts) or "body"


def field_errors(errors: list[dict[str, Any]]) -> FieldErrors:
    """Convert pydantic error dicts into client-facing field errors."""
    result = FieldErrors()
    for err in errors:
        field = _field_name(tuple(err.get("loc", ())))
        template = _MESSAGES.get(err.get("type", ""))
        ctx = err.get("ctx") or {}
        message = f"{field} {err.get('msg', 'is invalid')}"
        if template:
            try:
                message = template.format(field=field, **ctx)
            except (KeyError, IndexError):
                pass
        result.add(field, message)
    return result


def _app_error_response(err: AppError) -> JSONResponse:
    return JSONResponse(status_code=err.http_status, content=err.to_dict())


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.bind(code=exc.kind.value).error("request failed: {}", exc.message)
    else:
        logger.bind(code=exc.kind.value).info("request rejected: {}", exc.message)
    return _app_error_response(exc)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    err = field_errors(list(exc.errors())).to_error()
    logger.bind(code=err.kind.value).info("request.validation_error: {}", err.message)
    return _app_error_response(err)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
