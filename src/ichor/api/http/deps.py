"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from pydantic import BaseModel, ValidationError
from sqlmodel import Session

from src.ichor.api.http.app_data import ApplicationDependencies
from src.ichor.api.http.errors import field_errors
from src.ichor.core.sdk.errs import AppError, ErrorKind
from src.ichor.core.services.auth import Auth, AuthError, AuthorizationError, Claims


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the process-wide dependency container."""
    return request.app.state.app_dependencies


def get_auth(deps: ApplicationDependencies = Depends(get_app_dependencies)) -> Auth:
    return deps.auth


def get_db_session(
    deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> Iterator[Session]:
    """One session per request; handlers commit their own writes."""
    session = deps.database_service.get_session()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def query_params(model: type[BaseModel]):
    """Create a dependency that reads the query string into ``model``."""

    def dep(request: Request) -> BaseModel:
        try:
            return model.model_validate(dict(request.query_params))
        except ValidationError as e:
            raise field_errors(list(e.errors())).to_error() from e

    return dep


def authorize(
    rule: str,
    table: str | None = None,
    action: str | None = None,
    subject_param: str | None = None,
):
    """Create a dependency that authenticates the bearer token and applies ``rule``.

    ``subject_param`` names the path parameter holding the user id that
    subject-based rules compare against the token subject.
    """

    def dep(request: Request, auth: Auth = Depends(get_auth)) -> Claims:
        try:
            claims = auth.authenticate(request.headers.get("Authorization"))
        except AuthError as e:
            raise AppError.new(ErrorKind.UNAUTHENTICATED, e) from e

        user_id = request.path_params.get(subject_param) if subject_param else None
        try:
            auth.authorize(claims, user_id, rule, table, action)
        except AuthorizationError as e:
            raise AppError.new(ErrorKind.UNAUTHENTICATED, e) from e

        request.state.claims = claims
        return claims

    return dep
