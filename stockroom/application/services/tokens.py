# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-limited session tokens.

Tokens are stateless: the payload carries ``{"id", "username"}`` and the
issue timestamp, signed with HMAC over the configured secret. Nothing is
stored server side, so any instance holding the same secret can verify a
token issued by any other.
"""

from __future__ import annotations

from typing import Any

from itsdangerous import BadData, SignatureExpired, URLSafeTimedSerializer

from stockroom.domain.users.entities import Identity, User
from stockroom.domain.users.repositories import TokenIssuer
from stockroom.shared.errors import InvalidTokenError, TokenExpiredError

_SALT = "stockroom.session"


class SignedTokenService(TokenIssuer):
    def __init__(self, secret: str, expires_in: int) -> None:
        if not secret:
            raise ValueError("token secret must not be empty")
        self._serializer = URLSafeTimedSerializer(secret_key=secret, salt=_SALT)
        self._expires_in = expires_in

    @property
    def expires_in(self) -> int:
        return self._expires_in

    def issue(self, user: User) -> str:
        return str(self._serializer.dumps({"id": user.id, "username": user.username}))

    def verify(self, token: str) -> Identity:
        try:
            data: Any = self._serializer.loads(token, max_age=self._expires_in)
        except SignatureExpired as exc:
            raise TokenExpiredError() from exc
        except BadData as exc:
            raise InvalidTokenError() from exc

        if (
            not isinstance(data, dict)
            or not isinstance(data.get("id"), int)
            or not isinstance(data.get("username"), str)
        ):
            raise InvalidTokenError()
        return Identity(id=data["id"], username=data["username"])
