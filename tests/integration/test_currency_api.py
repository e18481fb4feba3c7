"""End-to-end CRUD behaviour on /v1/core/currencies."""

import uuid
from datetime import datetime

import pytest

BASE = "/v1/core/currencies"


def _payload(code: str = "USD", **overrides) -> dict:
    data = {
        "code": code,
        "name": f"{code} currency",
        "symbol": "$",
        "locale": "en-US",
        "decimal_places": 2,
        "sort_order": 0,
    }
    data.update(overrides)
    return data


@pytest.fixture
def create_currency(client, admin_headers):
    def _create(code: str = "USD", **overrides) -> dict:
        resp = client.post(BASE, json=_payload(code, **overrides), headers=admin_headers)
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _create


class TestCurrencyCreate:
    def test_create_and_fetch(self, client, admin_headers, create_currency):
        created = create_currency("USD")

        assert uuid.UUID(created["id"])
        assert created["is_active"] is True
        assert created["created_date"] == created["updated_date"]

        resp = client.get(f"{BASE}/{created['id']}", headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json() == created

    def test_missing_required_field(self, client, admin_headers):
        """A missing field is reported as invalid_argument with a field list."""
        payload = _payload()
        del payload["code"]

        resp = client.post(BASE, json=payload, headers=admin_headers)

        assert resp.status_code == 400
        assert resp.json() == {
            "code": "invalid_argument",
            "message": 'validate: [{"field":"code","error":"code is a required field"}]',
        }

    def test_duplicate_code_conflicts(self, client, admin_headers, create_currency):
        create_currency("EUR")
        resp = client.post(BASE, json=_payload("EUR"), headers=admin_headers)
        assert resp.status_code == 409
        assert resp.json()["code"] == "already_exists"

    def test_non_admin_cannot_create(self, client, user_headers):
        """Authorization runs before body validation and reports 401."""
        resp = client.post(BASE, json={}, headers=user_headers)
        assert resp.status_code == 401
        assert resp.json() == {
            "code": "unauthenticated",
            "message": "user does not have permission CREATE for table: core.currencies",
        }

    def test_missing_token(self, client):
        resp = client.get(BASE)
        assert resp.status_code == 401
        assert resp.json()["code"] == "unauthenticated"


class TestCurrencyQuery:
    def test_pagination(self, client, user_headers, create_currency):
        """25 rows, 10 per page: page 3 holds the last 5."""
        for i in range(25):
            create_currency(f"C{i:02d}", sort_order=i)

        resp = client.get(f"{BASE}?page=3&rows=10", headers=user_headers)

        assert resp.status_code == 200
        body = resp.json()
        assert body["total"] == 25
        assert body["page"] == 3
        assert body["rows_per_page"] == 10
        assert [c["code"] for c in body["items"]] == [f"C{i}" for i in range(20, 25)]

        first = client.get(f"{BASE}?page=1&rows=10", headers=user_headers).json()
        second = client.get(f"{BASE}?page=2&rows=10", headers=user_headers).json()
        first_ids = {c["id"] for c in first["items"]}
        second_ids = {c["id"] for c in second["items"]}
        assert len(second_ids) == 10
        assert first_ids.isdisjoint(second_ids)

    def test_order_by_and_filter(self, client, user_headers, create_currency):
        create_currency("AAA", sort_order=2)
        create_currency("BBB", sort_order=1, is_active=False)
        create_currency("CCC", sort_order=0)

        ordered = client.get(f"{BASE}?orderBy=code,DESC", headers=user_headers).json()
        inactive = client.get(f"{BASE}?is_active=false", headers=user_headers).json()

        assert [c["code"] for c in ordered["items"]] == ["CCC", "BBB", "AAA"]
        assert [c["code"] for c in inactive["items"]] == ["BBB"]
        assert inactive["total"] == 1

    @pytest.mark.parametrize(
        ("query", "field"),
        [
            ("page=0", "page"),
            ("rows=1000", "page"),
            ("orderBy=bogus", "orderby"),
            ("is_active=maybe", "is_active"),
            ("id=not-a-uuid", "id"),
        ],
    )
    def test_invalid_query_parameters(self, client, user_headers, query, field):
        resp = client.get(f"{BASE}?{query}", headers=user_headers)
        assert resp.status_code == 400
        assert resp.json()["code"] == "invalid_argument"
        assert f'"field":"{field}"' in resp.json()["message"]

    def test_query_all_and_batch(self, client, user_headers, create_currency):
        usd = create_currency("USD", sort_order=1)
        eur = create_currency("EUR", sort_order=0)

        everything = client.get(f"{BASE}/all", headers=user_headers)
        batch = client.post(
            f"{BASE}/batch/query",
            json={"ids": [usd["id"], str(uuid.uuid4())]},
            headers=user_headers,
        )

        assert [c["code"] for c in everything.json()] == ["EUR", "USD"]
        assert [c["id"] for c in batch.json()] == [usd["id"]]
        assert eur["id"] not in [c["id"] for c in batch.json()]

    def test_unknown_id(self, client, user_headers):
        resp = client.get(f"{BASE}/{uuid.uuid4()}", headers=user_headers)
        assert resp.status_code == 404
        assert resp.json() == {"code": "not_found", "message": "currency not found"}

    def test_malformed_id(self, client, user_headers):
        resp = client.get(f"{BASE}/12345", headers=user_headers)
        assert resp.status_code == 400


class TestCurrencyUpdateDelete:
    def test_partial_update(self, client, admin_headers, create_currency):
        created = create_currency("GBP")

        resp = client.put(
            f"{BASE}/{created['id']}", json={"name": "Pound Sterling"}, headers=admin_headers
        )

        assert resp.status_code == 200
        updated = resp.json()
        assert updated["name"] == "Pound Sterling"
        assert updated["code"] == "GBP"
        assert updated["created_date"] == created["created_date"]
        assert datetime.fromisoformat(updated["updated_date"]) > datetime.fromisoformat(
            created["updated_date"]
        )

    def test_update_to_existing_code_conflicts(self, client, admin_headers, create_currency):
        create_currency("USD")
        other = create_currency("EUR")
        resp = client.put(f"{BASE}/{other['id']}", json={"code": "USD"}, headers=admin_headers)
        assert resp.status_code == 409

    def test_delete(self, client, admin_headers, create_currency):
        created = create_currency("JPY", decimal_places=0)

        resp = client.delete(f"{BASE}/{created['id']}", headers=admin_headers)
        assert resp.status_code == 204

        assert client.get(f"{BASE}/{created['id']}", headers=admin_headers).status_code == 404
        assert client.delete(f"{BASE}/{created['id']}", headers=admin_headers).status_code == 404

    def test_non_admin_cannot_delete(self, client, user_headers, create_currency):
        created = create_currency("CAD")
        resp = client.delete(f"{BASE}/{created['id']}", headers=user_headers)
        assert resp.status_code == 401
