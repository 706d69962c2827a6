from __future__ import annotations

from datetime import UTC, datetime

import pytest
from itsdangerous.timed import TimestampSigner

from stockroom.application.services.password_hashing import WerkzeugPasswordHasher
from stockroom.application.services.tokens import SignedTokenService
from stockroom.domain.users.entities import Identity, User
from stockroom.shared.errors import InvalidTokenError, TokenExpiredError


def _user(user_id: int = 7, username: str = "alice") -> User:
    return User(
        id=user_id,
        username=username,
        password_hash="unused",
        email=None,
        created_at=datetime.now(UTC),
    )


def test_hash_is_salted_and_verifiable() -> None:
    hasher = WerkzeugPasswordHasher()

    first = hasher.hash("secret1")
    second = hasher.hash("secret1")

    assert first != second
    assert "secret1" not in first
    assert first.startswith("pbkdf2:sha256:600000$")
    assert hasher.verify("secret1", first)
    assert not hasher.verify("secret2", first)


def test_issued_token_decodes_to_user_identity() -> None:
    tokens = SignedTokenService("s3cret-key-for-tests", expires_in=3600)

    token = tokens.issue(_user(7, "alice"))

    assert tokens.verify(token) == Identity(id=7, username="alice")


def test_tampered_token_is_invalid() -> None:
    tokens = SignedTokenService("s3cret-key-for-tests", expires_in=3600)
    token = tokens.issue(_user())

    tampered = ("x" if token[0] != "x" else "y") + token[1:]

    with pytest.raises(InvalidTokenError):
        tokens.verify(tampered)


def test_token_signed_with_other_secret_is_invalid() -> None:
    foreign = SignedTokenService("another-secret-entirely", expires_in=3600).issue(_user())

    with pytest.raises(InvalidTokenError):
        SignedTokenService("s3cret-key-for-tests", expires_in=3600).verify(foreign)


def test_garbage_token_is_invalid() -> None:
    with pytest.raises(InvalidTokenError):
        SignedTokenService("s3cret-key-for-tests", expires_in=3600).verify("not-a-token")


def test_token_past_expiry_is_rejected_as_expired(monkeypatch: pytest.MonkeyPatch) -> None:
    tokens = SignedTokenService("s3cret-key-for-tests", expires_in=60)
    real_timestamp = TimestampSigner.get_timestamp

    with monkeypatch.context() as patch:
        patch.setattr(
            TimestampSigner, "get_timestamp", lambda self: real_timestamp(self) - 3600
        )
        token = tokens.issue(_user())

    with pytest.raises(TokenExpiredError):
        tokens.verify(token)


def test_empty_secret_is_refused() -> None:
    with pytest.raises(ValueError):
        SignedTokenService("", expires_in=60)
