"""Create, read, partially update and delete every resource over HTTP."""

import uuid

import pytest

ASSET_ID = str(uuid.uuid4())
MOVED_ASSET_ID = str(uuid.uuid4())


@pytest.fixture
def post(client, admin_headers):
    def _post(path: str, payload: dict, status: int = 200) -> dict:
        resp = client.post(path, json=payload, headers=admin_headers)
        assert resp.status_code == status, resp.text
        return resp.json()

    return _post


def _country(post) -> dict:
    return post(
        "/v1/location/countries",
        {"number": 250, "name": "France", "alpha_2": "FR", "alpha_3": "FRA"},
    )


def _region(post) -> dict:
    country = _country(post)
    return post(
        "/v1/location/regions",
        {"country_id": country["id"], "name": "Bretagne", "code": "BRE"},
    )


def _city(post) -> dict:
    return post("/v1/location/cities", {"region_id": _region(post)["id"], "name": "Rennes"})


def _street(post) -> dict:
    return post(
        "/v1/location/streets",
        {"city_id": _city(post)["id"], "line_1": "1 Rue de la Paix", "postal_code": "35000"},
    )


def _supplier(post) -> dict:
    return post(
        "/v1/procurement/suppliers",
        {
            "contact_infos_id": str(uuid.uuid4()),
            "name": "Northwind",
            "lead_time_days": 4,
            "rating": "4.00",
        },
    )


def _supplier_product(post) -> dict:
    return post(
        "/v1/procurement/supplierproducts",
        {
            "supplier_id": _supplier(post)["id"],
            "product_id": str(uuid.uuid4()),
            "supplier_part_number": "NW-1",
            "min_order_quantity": 1,
            "max_order_quantity": 50,
            "lead_time_days": 4,
            "unit_cost": "3.10",
        },
    )


RESOURCES = [
    pytest.param(
        "/v1/core/currencies",
        lambda post: {
            "code": "XTS",
            "name": "Test currency",
            "symbol": "T",
            "locale": "en-US",
            "decimal_places": 2,
        },
        {"name": "Testing currency"},
        id="currency",
    ),
    pytest.param(
        "/v1/core/users",
        lambda post: {
            "username": "roundtrip",
            "first_name": "Round",
            "last_name": "Trip",
            "email": "roundtrip@example.com",
            "roles": ["USER"],
            "password": "long-enough-password",
            "password_confirm": "long-enough-password",
        },
        {"first_name": "Changed"},
        id="user",
    ),
    pytest.param(
        "/v1/config/forms",
        lambda post: {"name": "Receiving"},
        {"name": "Receiving dock"},
        id="form",
    ),
    pytest.param(
        "/v1/assets/tags",
        lambda post: {"name": "fragile"},
        {"description": "Handle with care"},
        id="tag",
    ),
    pytest.param(
        "/v1/assets/assettags",
        lambda post: {
            "valid_asset_id": ASSET_ID,
            "tag_id": post("/v1/assets/tags", {"name": "hazmat"})["id"],
        },
        {"valid_asset_id": MOVED_ASSET_ID},
        id="asset_tag",
    ),
    pytest.param(
        "/v1/location/countries",
        lambda post: {"number": 56, "name": "Belgium", "alpha_2": "BE", "alpha_3": "BEL"},
        {"name": "Kingdom of Belgium"},
        id="country",
    ),
    pytest.param(
        "/v1/location/regions",
        lambda post: {"country_id": _country(post)["id"], "name": "Normandie", "code": "NOR"},
        {"name": "Normandy"},
        id="region",
    ),
    pytest.param(
        "/v1/location/cities",
        lambda post: {"region_id": _region(post)["id"], "name": "Brest"},
        {"name": "Saint-Malo"},
        id="city",
    ),
    pytest.param(
        "/v1/location/streets",
        lambda post: {
            "city_id": _city(post)["id"],
            "line_1": "12 Quai Duguay",
            "postal_code": "35000",
        },
        {"line_2": "Building B"},
        id="street",
    ),
    pytest.param(
        "/v1/hr/offices",
        lambda post: {"name": "Rennes HQ", "street_id": _street(post)["id"]},
        {"name": "Rennes Campus"},
        id="office",
    ),
    pytest.param(
        "/v1/procurement/suppliers",
        lambda post: {
            "contact_infos_id": str(uuid.uuid4()),
            "name": "Contoso",
            "lead_time_days": 10,
            "rating": "3.50",
        },
        {"lead_time_days": 12},
        id="supplier",
    ),
    pytest.param(
        "/v1/procurement/supplierproducts",
        lambda post: {
            "supplier_id": _supplier(post)["id"],
            "product_id": str(uuid.uuid4()),
            "supplier_part_number": "NW-2",
            "min_order_quantity": 5,
            "max_order_quantity": 500,
            "lead_time_days": 2,
            "unit_cost": "0.45",
        },
        {"supplier_part_number": "NW-2B"},
        id="supplier_product",
    ),
    pytest.param(
        "/v1/procurement/purchaseorderlineitemstatuses",
        lambda post: {"name": "IN_TRANSIT", "sort_order": 3},
        {"description": "Shipped by the supplier"},
        id="po_line_item_status",
    ),
    pytest.param(
        "/v1/inventory/inventorytransactions",
        lambda post: {
            "product_id": str(uuid.uuid4()),
            "location_id": str(uuid.uuid4()),
            "user_id": str(uuid.uuid4()),
            "quantity": 12,
            "transaction_type": "inbound",
            "reference_number": "PO-1001",
            "transaction_date": "2024-03-01T09:30:00Z",
        },
        {"reference_number": "PO-1002"},
        id="inventory_transaction",
    ),
    pytest.param(
        "/v1/inventory/lottrackings",
        lambda post: {
            "supplier_product_id": _supplier_product(post)["id"],
            "lot_number": "LOT-RT",
            "manufacture_date": "2024-01-01T00:00:00Z",
            "expiration_date": "2025-01-01T00:00:00Z",
            "received_date": "2024-01-10T00:00:00Z",
            "quantity": 20,
            "quality_status": "pending",
        },
        {"quality_status": "passed"},
        id="lot_trackings",
    ),
    pytest.param(
        "/v1/sales/orderlineitems",
        lambda post: {
            "order_id": str(uuid.uuid4()),
            "product_id": str(uuid.uuid4()),
            "quantity": 2,
            "unit_price": "10.00",
            "line_item_fulfillment_statuses_id": str(uuid.uuid4()),
            "created_by": str(uuid.uuid4()),
        },
        {"description": "Gift wrapped"},
        id="order_line_item",
    ),
]


@pytest.mark.parametrize(("path", "build", "update"), RESOURCES)
def test_round_trip(client, admin_headers, post, path, build, update):
    created = post(path, build(post))
    url = f"{path}/{created['id']}"

    fetched = client.get(url, headers=admin_headers)
    assert fetched.status_code == 200
    assert fetched.json() == created

    resp = client.put(url, json=update, headers=admin_headers)
    assert resp.status_code == 200, resp.text
    updated = resp.json()
    for name, value in update.items():
        assert updated[name] == value
    untouched = {k: v for k, v in created.items() if k not in update and k != "updated_date"}
    assert {k: updated[k] for k in untouched} == untouched

    assert client.delete(url, headers=admin_headers).status_code == 204
    missing = client.get(url, headers=admin_headers)
    assert missing.status_code == 404
    assert missing.json()["code"] == "not_found"


class TestAssetTagConstraints:
    def test_pair_is_unique(self, post):
        tag = post("/v1/assets/tags", {"name": "calibrated"})
        payload = {"valid_asset_id": ASSET_ID, "tag_id": tag["id"]}
        post("/v1/assets/assettags", payload)

        body = post("/v1/assets/assettags", payload, status=409)

        assert body == {"code": "already_exists", "message": "asset tag entry is not unique"}

    def test_same_tag_on_another_asset(self, post):
        tag = post("/v1/assets/tags", {"name": "leased"})
        post("/v1/assets/assettags", {"valid_asset_id": ASSET_ID, "tag_id": tag["id"]})
        post("/v1/assets/assettags", {"valid_asset_id": MOVED_ASSET_ID, "tag_id": tag["id"]})

    def test_unknown_tag(self, post):
        body = post(
            "/v1/assets/assettags",
            {"valid_asset_id": ASSET_ID, "tag_id": str(uuid.uuid4())},
            status=409,
        )
        assert body == {"code": "aborted", "message": "tag does not exist"}


class TestOfficeConstraints:
    def test_name_is_unique(self, post):
        street = _street(post)
        post("/v1/hr/offices", {"name": "Depot", "street_id": street["id"]})

        body = post("/v1/hr/offices", {"name": "Depot", "street_id": street["id"]}, status=409)

        assert body == {"code": "already_exists", "message": "office entry is not unique"}

    def test_unknown_street(self, post):
        body = post(
            "/v1/hr/offices", {"name": "Nowhere", "street_id": str(uuid.uuid4())}, status=409
        )
        assert body == {"code": "aborted", "message": "street does not exist"}
