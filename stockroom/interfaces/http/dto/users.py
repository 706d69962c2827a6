from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from stockroom.domain import User


class UserDTO(BaseModel):
    """Public view of a user. The password hash is never part of it."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str | None = None
    created_at: datetime

    @classmethod
    def dump(cls, user: User) -> dict:
        return cls.model_validate(user).model_dump(mode="json")
