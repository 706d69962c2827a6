from .base import (
    AppError,
    DomainError,
    InvalidTokenError,
    MissingTokenError,
    ServiceUnavailableError,
    TokenExpiredError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "InvalidTokenError",
    "MissingTokenError",
    "ServiceUnavailableError",
    "TokenExpiredError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
