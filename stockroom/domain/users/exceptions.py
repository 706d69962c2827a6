# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from stockroom.shared.errors.base import DomainError


class DuplicateUsernameError(DomainError):
    code = "DUPLICATE_USERNAME"
    status = HTTPStatus.CONFLICT
    message = "Username already exists"


class InvalidCredentialsError(DomainError):
    code = "INVALID_CREDENTIALS"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid username or password"


class UserNotFoundError(DomainError):
    code = "USER_NOT_FOUND"
    status = HTTPStatus.NOT_FOUND
    message = "User not found"

    def __init__(self, user_id: int) -> None:
        super().__init__(context={"id": user_id})
