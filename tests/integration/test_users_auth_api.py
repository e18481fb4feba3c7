"""User management and sign-in endpoints."""

import pytest

from tests.fixtures.auth import PASSWORD, USER_EMAIL

USERS = "/v1/core/users"
LOGIN = "/v1/auth/login"


def _new_user(**overrides) -> dict:
    data = {
        "username": "mgarcia",
        "first_name": "Maria",
        "last_name": "Garcia",
        "email": "maria@example.com",
        "roles": ["USER"],
        "password": "long-enough-password",
        "password_confirm": "long-enough-password",
    }
    data.update(overrides)
    return data


class TestUserEndpoints:
    def test_create_hides_password(self, client, admin_headers):
        resp = client.post(USERS, json=_new_user(), headers=admin_headers)

        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["email"] == "maria@example.com"
        assert "password" not in body
        assert "password_hash" not in body

    def test_password_confirmation_must_match(self, client, admin_headers):
        resp = client.post(
            USERS, json=_new_user(password_confirm="something-else"), headers=admin_headers
        )
        assert resp.status_code == 400
        assert "passwords do not match" in resp.json()["message"]

    def test_invalid_email(self, client, admin_headers):
        resp = client.post(USERS, json=_new_user(email="not-an-email"), headers=admin_headers)
        assert resp.status_code == 400
        assert '"field":"email"' in resp.json()["message"]

    def test_user_updates_own_account(self, client, regular_user, user_headers):
        """The subject of a token may edit their own row."""
        resp = client.put(
            f"{USERS}/{regular_user.id}", json={"first_name": "Renamed"}, headers=user_headers
        )
        assert resp.status_code == 200
        assert resp.json()["first_name"] == "Renamed"

    def test_user_cannot_update_someone_else(self, client, admin_user, user_headers):
        resp = client.put(
            f"{USERS}/{admin_user.id}", json={"first_name": "Hacked"}, headers=user_headers
        )
        assert resp.status_code == 401

    def test_user_cannot_change_own_roles(
        self, client, admin_headers, regular_user, user_headers
    ):
        """Roles are not part of a profile update, even for the account owner."""
        resp = client.put(
            f"{USERS}/{regular_user.id}", json={"roles": ["ADMIN"]}, headers=user_headers
        )

        assert resp.status_code == 400
        assert resp.json()["message"] == (
            'validate: [{"field":"roles","error":"roles is not an allowed field"}]'
        )
        stored = client.get(f"{USERS}/{regular_user.id}", headers=admin_headers).json()
        assert stored["roles"] == ["USER"]

    def test_unknown_role_rejected(self, client, admin_headers):
        resp = client.post(USERS, json=_new_user(roles=["SUPERUSER"]), headers=admin_headers)
        assert resp.status_code == 400
        assert '"field":"roles.0"' in resp.json()["message"]

    def test_disabled_user_token_rejected(
        self, client, admin_headers, regular_user, user_headers
    ):
        assert client.get(USERS, headers=user_headers).status_code == 200

        resp = client.put(
            f"{USERS}/{regular_user.id}", json={"enabled": False}, headers=admin_headers
        )
        assert resp.status_code == 200

        rejected = client.get(USERS, headers=user_headers)
        assert rejected.status_code == 401
        assert "user not enabled" in rejected.json()["message"]


class TestUserRoles:
    def test_admin_grants_role(self, client, admin_headers, regular_user):
        resp = client.put(
            f"{USERS}/role/{regular_user.id}",
            json={"roles": ["ADMIN", "USER"]},
            headers=admin_headers,
        )

        assert resp.status_code == 200, resp.text
        assert resp.json()["roles"] == ["ADMIN", "USER"]
        assert resp.json()["first_name"] == "Regular"

    def test_user_cannot_grant_own_role(self, client, regular_user, user_headers):
        resp = client.put(
            f"{USERS}/role/{regular_user.id}", json={"roles": ["ADMIN"]}, headers=user_headers
        )
        assert resp.status_code == 401

    @pytest.mark.parametrize("roles", [[], ["ROOT"]])
    def test_invalid_roles(self, client, admin_headers, regular_user, roles):
        resp = client.put(
            f"{USERS}/role/{regular_user.id}", json={"roles": roles}, headers=admin_headers
        )
        assert resp.status_code == 400
        assert '"field":"roles' in resp.json()["message"]


class TestLogin:
    def test_login_issues_usable_token(self, client, regular_user):
        resp = client.post(LOGIN, json={"email": USER_EMAIL, "password": PASSWORD})

        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["user_id"] == str(regular_user.id)
        assert body["roles"] == ["USER"]

        me = client.get(
            f"{USERS}/{regular_user.id}",
            headers={"Authorization": f"Bearer {body['token']}"},
        )
        assert me.status_code == 200
        assert me.json()["email"] == USER_EMAIL

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": USER_EMAIL, "password": "wrong-password"},
            {"email": "nobody@example.com", "password": PASSWORD},
        ],
    )
    def test_bad_credentials(self, client, regular_user, payload):
        resp = client.post(LOGIN, json=payload)
        assert resp.status_code == 401
        assert resp.json() == {"code": "unauthenticated", "message": "authentication failed"}
