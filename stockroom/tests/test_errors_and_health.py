from __future__ import annotations

from stockroom.shared.config import SecurityConfig

STRONG_SECRET = "k3J9v0mQx7Lr2Tz8Wc4Yb6Nd1Hf5Sa0P"


def test_unknown_route_is_json_404(client) -> None:
    response = client.get("/nowhere")

    assert response.status_code == 404
    assert response.get_json()["error"] == "ROUTE_NOT_FOUND"


def test_wrong_method_is_json_405(client) -> None:
    response = client.patch("/products")

    assert response.status_code == 405
    assert response.get_json()["error"] == "METHOD_NOT_ALLOWED"
    assert "GET" in response.headers["Allow"]


def test_unexpected_error_details_only_outside_production(build_app) -> None:
    dev = build_app("dev.db")
    prod = build_app("prod.db", APP_ENV="production", JWT_SECRET=STRONG_SECRET)

    def boom():
        raise RuntimeError("kaboom")

    bodies = []
    for app in (dev, prod):
        app.add_url_rule("/boom", "boom", boom)
        response = app.test_client().get("/boom")
        assert response.status_code == 500
        bodies.append(response.get_json())

    dev_body, prod_body = bodies
    assert dev_body["error"] == prod_body["error"] == "INTERNAL_SERVER_ERROR"
    assert "kaboom" in dev_body["details"]
    assert "details" not in prod_body


def test_unreachable_database_answers_503(build_app) -> None:
    app = build_app("missing/dir/stockroom.db")
    client = app.test_client()

    assert app.extensions["stockroom"].database.is_ready() is False

    signup = client.post("/signup", json={"username": "alice", "password": "secret1"})
    products = client.get("/products")
    health = client.get("/health")

    assert signup.status_code == 503
    assert signup.get_json()["error"] == "SERVICE_UNAVAILABLE"
    assert products.status_code == 503
    assert health.status_code == 503
    assert health.get_json()["database"] == "disconnected"
    assert client.get("/").status_code == 200


def test_security_and_request_id_headers(client) -> None:
    response = client.get("/", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert "Strict-Transport-Security" not in response.headers


def test_hsts_when_enabled(build_app) -> None:
    app = build_app(security=SecurityConfig(ENABLE_HSTS=True))  # type: ignore[call-arg]

    response = app.test_client().get("/")

    assert response.headers["Strict-Transport-Security"].startswith("max-age=")


def test_service_becomes_ready_once_database_appears(build_app, tmp_path) -> None:
    app = build_app("late/stockroom.db")
    client = app.test_client()
    assert client.post("/signup", json={"username": "alice", "password": "secret1"}).status_code == 503

    (tmp_path / "late").mkdir()

    health = client.get("/health")
    assert health.status_code == 200
    assert health.get_json()["ready"] is True
    assert client.post("/signup", json={"username": "alice", "password": "secret1"}).status_code == 201


def test_generated_request_id_is_echoed(client) -> None:
    first = client.get("/")
    second = client.get("/")

    assert first.headers["X-Request-ID"]
    assert first.headers["X-Request-ID"] != second.headers["X-Request-ID"]
