from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, EmailStr, Field, StringConstraints, field_validator

MIN_PASSWORD_LENGTH = 6

# Passwords are taken verbatim; only usernames and emails are trimmed.
Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class RegisterRequestDTO(BaseModel):
    username: Username
    password: str = Field(min_length=MIN_PASSWORD_LENGTH, max_length=128)
    email: EmailStr | None = None

    @field_validator("email", mode="before")
    @classmethod
    def _blank_email(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


class LoginRequestDTO(BaseModel):
    username: Username
    password: str = Field(min_length=1, max_length=128)
