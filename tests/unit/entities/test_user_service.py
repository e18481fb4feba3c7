"""Consolidated user domain tests: password handling and lookups."""

import pytest
from pydantic import ValidationError

from src.ichor.core.sdk.errors import AuthenticationError
from src.ichor.core.services.auth import ROLE_ADMIN, ROLE_USER, hash_password, verify_password
from src.ichor.entities.core.user import (
    NewUser,
    UpdateUser,
    UpdateUserRole,
    UserNotFoundError,
    UserRepository,
    UserService,
    UserUniqueError,
)


@pytest.fixture
def users(session) -> UserService:
    return UserService(UserRepository(session))


def _new_user(**overrides) -> NewUser:
    data = {
        "username": "jdoe",
        "first_name": "John",
        "last_name": "Doe",
        "email": "John.Doe@Example.com",
        "roles": [ROLE_USER],
        "password": "s3cret-password",
    }
    data.update(overrides)
    return NewUser(**data)


class TestPasswordHashing:
    def test_hash_and_verify(self):
        encoded = hash_password("hunter22", iterations=1000)
        assert encoded.startswith("pbkdf2_sha256$1000$")
        assert verify_password("hunter22", encoded)
        assert not verify_password("hunter23", encoded)

    def test_salted(self):
        """The same password never hashes to the same value twice."""
        assert hash_password("same", iterations=1000) != hash_password("same", iterations=1000)

    def test_malformed_hash_rejected(self):
        assert not verify_password("anything", "")
        assert not verify_password("anything", "md5$1$abc$def")


class TestUserService:
    def test_create_hashes_password_and_lowercases_email(self, users):
        user = users.create(_new_user())

        assert user.email == "john.doe@example.com"
        assert user.password_hash != "s3cret-password"
        assert verify_password("s3cret-password", user.password_hash)
        assert "password_hash" not in user.model_dump()
        assert user.full_name == "John Doe"

    def test_unique_email(self, users):
        users.create(_new_user())
        with pytest.raises(UserUniqueError):
            users.create(_new_user(username="other"))

    def test_query_by_email_is_case_insensitive(self, users):
        created = users.create(_new_user())
        assert users.query_by_email("JOHN.DOE@example.com").id == created.id
        with pytest.raises(UserNotFoundError):
            users.query_by_email("nobody@example.com")

    def test_update_password(self, users):
        user = users.create(_new_user())
        updated = users.update(user, UpdateUser(password="brand-new-password"))

        assert verify_password("brand-new-password", updated.password_hash)
        assert users.authenticate(user.email, "brand-new-password").id == user.id

    def test_authenticate(self, users):
        user = users.create(_new_user())

        assert users.authenticate("john.doe@example.com", "s3cret-password").id == user.id
        with pytest.raises(AuthenticationError):
            users.authenticate("john.doe@example.com", "wrong")
        with pytest.raises(AuthenticationError):
            users.authenticate("missing@example.com", "s3cret-password")

    def test_disabled_user_cannot_authenticate(self, users):
        users.create(_new_user(enabled=False))
        with pytest.raises(AuthenticationError, match="user disabled"):
            users.authenticate("john.doe@example.com", "s3cret-password")

    def test_update_roles(self, users):
        user = users.create(_new_user())

        promoted = users.update_roles(user, UpdateUserRole(roles=[ROLE_ADMIN, ROLE_USER]))

        assert promoted.roles == [ROLE_ADMIN, ROLE_USER]
        assert promoted.first_name == user.first_name
        assert users.query_by_id(user.id).roles == [ROLE_ADMIN, ROLE_USER]

    def test_profile_update_has_no_roles(self):
        assert "roles" not in UpdateUser.model_fields

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError):
            _new_user(roles=["SUPERUSER"])
        with pytest.raises(ValidationError):
            UpdateUserRole(roles=["SUPERUSER"])
