# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from stockroom.domain.users.entities import User
from stockroom.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str, email: str | None = None) -> tuple[User, str]:
        hashed = self._password_hasher.hash(password)
        # Uniqueness is enforced by the users table; the repository raises
        # DuplicateUsernameError on conflict.
        persisted = self._users.add(username, hashed, email)
        return persisted, self._tokens.issue(persisted)
