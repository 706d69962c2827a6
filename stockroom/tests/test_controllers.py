from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from stockroom.application.use_cases.users.register_user import RegisterUserUseCase
from stockroom.domain import Product, User
from stockroom.infrastructure.db import Database
from stockroom.interfaces.http.controllers.auth_controller import AuthController
from stockroom.interfaces.http.controllers.products_controller import ProductsController
from stockroom.shared.errors import register_error_handler


def _passthrough_database() -> Database:
    database = MagicMock()
    database.requires_ready.side_effect = lambda view: view
    return cast(Database, database)


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    register_error_handler(app, expose_details=True)
    return app


def test_register_endpoint_returns_token_and_user(flask_app: Flask) -> None:
    register_called: dict[str, tuple] = {}

    class StubRegister:
        def execute(self, username: str, password: str, email: str | None = None):
            register_called["args"] = (username, password, email)
            return (
                User(
                    id=1,
                    username=username,
                    password_hash="hash",
                    email=email,
                    created_at=datetime.now(UTC),
                ),
                "token123",
            )

    controller = AuthController(
        register_use_case=cast(RegisterUserUseCase, StubRegister()),
        login_use_case=MagicMock(),
        database=_passthrough_database(),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/signup", json={"username": " alice ", "password": " secret1 "})

    assert response.status_code == 201
    assert register_called["args"] == ("alice", " secret1 ", None)
    body = response.get_json()
    assert body["token"] == "token123"
    assert "password_hash" not in body["user"]


def test_login_invalid_payload_returns_400(flask_app: Flask) -> None:
    login = MagicMock()
    controller = AuthController(
        register_use_case=MagicMock(),
        login_use_case=login,
        database=_passthrough_database(),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"username": "a"})

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == "VALIDATION_ERROR"
    assert payload["context"]["fields"] == ["password"]
    login.execute.assert_not_called()


def test_patch_forwards_only_supplied_fields(flask_app: Flask) -> None:
    product = Product(
        product_id=4,
        product_name="Widget",
        description="",
        quantity=5,
        price=Decimal("9.99"),
        currentstamp=datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC),
    )
    patch = MagicMock()
    patch.execute.return_value = product
    auth = MagicMock()
    auth.required.side_effect = lambda view: view

    controller = ProductsController(
        list_products=MagicMock(),
        get_product=MagicMock(),
        create_products=MagicMock(),
        replace_product=MagicMock(),
        patch_product=patch,
        delete_product=MagicMock(),
        bulk_replace=MagicMock(),
        bulk_delete=MagicMock(),
        auth=auth,
        database=_passthrough_database(),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.patch(
            "/product/4", json={"product_id": 999, "quantity": 5, "bogus": True}
        )

    assert response.status_code == 200
    patch.execute.assert_called_once_with(4, {"quantity": 5})
    assert response.get_json()["price"] == "9.99"
    assert response.get_json()["currentstamp"].startswith("2026-01-02T03:04:05")
