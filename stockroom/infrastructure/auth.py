# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from flask import g, request

from stockroom.domain.users.entities import Identity
from stockroom.domain.users.repositories import TokenIssuer
from stockroom.shared.errors import AppError, MissingTokenError
from stockroom.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])


def bearer_token(header: str | None) -> str | None:
    if not header:
        return None
    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


def current_identity() -> Identity:
    """Return the identity attached by ``AuthGate`` for this request."""
    identity = getattr(g, "identity", None)
    if identity is None:
        raise RuntimeError("current_identity() used outside an authenticated view")
    return identity


class AuthGate:
    def __init__(self, tokens: TokenIssuer) -> None:
        self._tokens = tokens

    def authenticate(self) -> Identity:
        token = bearer_token(request.headers.get("Authorization"))
        if not token:
            logger.warning(f"auth.gate: missing token on {request.method} {request.path}")
            raise MissingTokenError()

        try:
            identity = self._tokens.verify(token)
        except AppError as exc:
            logger.warning(f"auth.gate: {exc.code} on {request.method} {request.path}")
            raise

        g.identity = identity
        g.user_id = identity.id
        return identity

    def required(self, view: F) -> F:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            self.authenticate()
            return view(*args, **kwargs)

        return inner  # type: ignore[return-value]
