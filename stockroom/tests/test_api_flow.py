from __future__ import annotations

from flask.testing import FlaskClient


def test_signup_login_and_product_lifecycle(client: FlaskClient) -> None:
    signup = client.post("/signup", json={"username": "alice", "password": "secret1"})
    assert signup.status_code == 201
    assert signup.get_json()["token"]

    login = client.post("/login", json={"username": "alice", "password": "secret1"})
    assert login.status_code == 200
    headers = {"Authorization": f"Bearer {login.get_json()['token']}"}

    listing = client.get("/products", headers=headers)
    assert listing.status_code == 200
    assert listing.get_json() == []

    created = client.post(
        "/products",
        json=[{"product_name": "Widget", "quantity": 5, "price": 9.99}],
        headers=headers,
    )
    assert created.status_code == 201
    [row] = created.get_json()
    assert isinstance(row["product_id"], int)
    assert row["product_name"] == "Widget"
    assert row["quantity"] == 5
    assert row["price"] == "9.99"
    assert row["description"] == ""

    fetched = client.get(f"/product/{row['product_id']}", headers=headers)
    assert fetched.status_code == 200
    assert fetched.get_json() == row

    deleted = client.delete(f"/product/{row['product_id']}", headers=headers)
    assert deleted.status_code == 200
    assert deleted.get_json()["product"]["product_id"] == row["product_id"]

    gone = client.get(f"/product/{row['product_id']}", headers=headers)
    assert gone.status_code == 404
    assert gone.get_json()["error"] == "PRODUCT_NOT_FOUND"


def test_index_describes_service(client: FlaskClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    body = response.get_json()
    assert body["message"].startswith("Welcome")
    assert body["service"] == "stockroom"


def test_health_reports_connected_database(client: FlaskClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json()["database"] == "connected"
    assert response.get_json()["ready"] is True
