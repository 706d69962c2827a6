from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from stockroom.app import create_app
from stockroom.application.services.password_hashing import WerkzeugPasswordHasher
from stockroom.infrastructure.container import Container
from stockroom.shared.config import AppConfig, DatabaseConfig

TEST_SECRET = "test-suite-signing-secret-0123456789"


def make_config(db_path: Path, **overrides: object) -> AppConfig:
    values: dict[str, object] = {
        "APP_ENV": "testing",
        "JWT_SECRET": TEST_SECRET,
        "JWT_EXPIRY": "1h",
        "database": DatabaseConfig(DATABASE_URL=f"sqlite:///{db_path}"),  # type: ignore[call-arg]
    }
    values.update(overrides)
    return AppConfig(**values)  # type: ignore[arg-type]


def make_app(config: AppConfig) -> Flask:
    # Cheap work factor keeps the suite fast; production uses the default.
    hasher = WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")
    return create_app(config, container=Container(config, password_hasher=hasher))


@pytest.fixture()
def config(tmp_path: Path) -> AppConfig:
    return make_config(tmp_path / "stockroom.db")


@pytest.fixture()
def app(config: AppConfig) -> Iterator[Flask]:
    flask_app = make_app(config)
    yield flask_app
    flask_app.extensions["stockroom"].database.dispose()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def auth_headers(client: FlaskClient) -> dict[str, str]:
    response = client.post("/signup", json={"username": "alice", "password": "secret1"})
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.get_json()['token']}"}


@pytest.fixture()
def build_app(tmp_path: Path) -> Iterator[Callable[..., Flask]]:
    built: list[Flask] = []

    def _build(db_name: str = "stockroom.db", **overrides: object) -> Flask:
        flask_app = make_app(make_config(tmp_path / db_name, **overrides))
        built.append(flask_app)
        return flask_app

    yield _build
    for flask_app in built:
        flask_app.extensions["stockroom"].database.dispose()
