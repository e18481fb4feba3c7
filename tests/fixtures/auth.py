"""Seeded users and bearer tokens for API tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from src.ichor.api.http.app_data import ApplicationDependencies
from src.ichor.core.services.auth import ROLE_ADMIN, ROLE_USER
from src.ichor.entities.core.user import NewUser, User, UserService

ADMIN_EMAIL = "admin@example.com"
USER_EMAIL = "user@example.com"
PASSWORD = "correct-horse-battery"


def _seed_user(
    deps: ApplicationDependencies, username: str, email: str, roles: list[str]
) -> User:
    with deps.database_service.session_scope() as session:
        return deps.service(UserService, session).create(
            NewUser(
                username=username,
                first_name=username.capitalize(),
                last_name="Tester",
                email=email,
                roles=roles,
                password=PASSWORD,
            )
        )


@pytest.fixture
def admin_user(app_dependencies: ApplicationDependencies) -> User:
    return _seed_user(app_dependencies, "admin", ADMIN_EMAIL, [ROLE_ADMIN, ROLE_USER])


@pytest.fixture
def regular_user(app_dependencies: ApplicationDependencies) -> User:
    return _seed_user(app_dependencies, "regular", USER_EMAIL, [ROLE_USER])


@pytest.fixture
def bearer() -> Callable[[str], dict[str, str]]:
    def _headers(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def admin_headers(
    app_dependencies: ApplicationDependencies, admin_user: User, bearer
) -> dict[str, str]:
    token, _ = app_dependencies.auth.generate_token(str(admin_user.id), admin_user.roles)
    return bearer(token)


@pytest.fixture
def user_headers(
    app_dependencies: ApplicationDependencies, regular_user: User, bearer
) -> dict[str, str]:
    token, _ = app_dependencies.auth.generate_token(
        str(regular_user.id), regular_user.roles
    )
    return bearer(token)
