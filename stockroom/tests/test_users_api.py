from __future__ import annotations

from flask import Flask
from flask.testing import FlaskClient


def test_signup_returns_public_user_and_token(client: FlaskClient) -> None:
    response = client.post(
        "/signup",
        json={"username": "alice", "password": "secret1", "email": "alice@example.com"},
    )

    assert response.status_code == 201
    body = response.get_json()
    assert body["message"] == "User registered successfully"
    assert body["user"]["username"] == "alice"
    assert body["user"]["email"] == "alice@example.com"
    assert "password" not in body["user"]
    assert "password_hash" not in body["user"]


def test_login_token_identity_matches_user(app: Flask, client: FlaskClient) -> None:
    signup = client.post("/signup", json={"username": "alice", "password": "secret1"})
    user_id = signup.get_json()["user"]["id"]

    login = client.post("/login", json={"username": "alice", "password": "secret1"})

    identity = app.extensions["stockroom"].token_service.verify(login.get_json()["token"])
    assert (identity.id, identity.username) == (user_id, "alice")
    assert login.get_json()["user"]["id"] == user_id


def test_duplicate_username_is_conflict(client: FlaskClient) -> None:
    assert client.post("/signup", json={"username": "alice", "password": "secret1"}).status_code == 201

    again = client.post("/signup", json={"username": "alice", "password": "other12"})

    assert again.status_code == 409
    assert again.get_json()["error"] == "DUPLICATE_USERNAME"


def test_signup_validation(client: FlaskClient) -> None:
    short = client.post("/signup", json={"username": "alice", "password": "12345"})
    missing = client.post("/signup", json={"password": "secret1"})
    not_json = client.post("/signup", data="username=alice", content_type="text/plain")

    for response in (short, missing, not_json):
        assert response.status_code == 400
        assert response.get_json()["error"] == "VALIDATION_ERROR"
    assert "password" in short.get_json()["context"]["fields"]


def test_bad_login_messages_do_not_reveal_usernames(client: FlaskClient) -> None:
    client.post("/signup", json={"username": "alice", "password": "secret1"})

    wrong_password = client.post("/login", json={"username": "alice", "password": "nope123"})
    unknown_user = client.post("/login", json={"username": "mallory", "password": "secret1"})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.get_json() == unknown_user.get_json()
    assert wrong_password.get_json()["error"] == "INVALID_CREDENTIALS"


def test_users_listing_is_newest_first_without_hashes(
    client: FlaskClient, auth_headers: dict[str, str]
) -> None:
    client.post("/signup", json={"username": "bob", "password": "secret2"})

    response = client.get("/users", headers=auth_headers)

    assert response.status_code == 200
    users = response.get_json()
    assert [u["username"] for u in users] == ["bob", "alice"]
    for user in users:
        assert set(user) == {"id", "username", "email", "created_at"}


def test_get_user_by_id(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    listing = client.get("/users", headers=auth_headers).get_json()
    alice_id = listing[0]["id"]

    found = client.get(f"/user/{alice_id}", headers=auth_headers)
    missing = client.get("/user/9999", headers=auth_headers)

    assert found.status_code == 200
    assert found.get_json()["username"] == "alice"
    assert missing.status_code == 404
    assert missing.get_json()["error"] == "USER_NOT_FOUND"


def test_user_routes_require_token(client: FlaskClient) -> None:
    assert client.get("/users").status_code == 401
    assert client.get("/user/1", headers={"Authorization": "Bearer forged"}).status_code == 403


def test_signup_email_is_checked_and_blank_means_none(client: FlaskClient) -> None:
    invalid = client.post(
        "/signup", json={"username": "alice", "password": "secret1", "email": "not-an-email"}
    )
    blank = client.post("/signup", json={"username": "bob", "password": "secret1", "email": "  "})

    assert invalid.status_code == 400
    assert invalid.get_json()["context"]["fields"] == ["email"]
    assert blank.status_code == 201
    assert blank.get_json()["user"]["email"] is None
