# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True, eq=False)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str = "Request failed"
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code, "message": self.message}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "DOMAIN_ERROR"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        resolved_message = message or cast(str, getattr(self, "message", "Request failed"))
        super().__init__(
            code=resolved_code,
            status=resolved_status,
            message=resolved_message,
            context=context,
        )


class ValidationError(AppError):
    def __init__(
        self,
        message: str = "Invalid request payload",
        *,
        code: str = "VALIDATION_ERROR",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            message=message,
            context=context,
        )


class ServiceUnavailableError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="SERVICE_UNAVAILABLE",
            status=HTTPStatus.SERVICE_UNAVAILABLE,
            message="Database is not ready, try again later",
        )


class MissingTokenError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="MISSING_TOKEN",
            status=HTTPStatus.UNAUTHORIZED,
            message="Missing token",
        )


class InvalidTokenError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="INVALID_TOKEN",
            status=HTTPStatus.FORBIDDEN,
            message="Invalid token",
        )


class TokenExpiredError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="TOKEN_EXPIRED",
            status=HTTPStatus.FORBIDDEN,
            message="Token has expired",
        )
