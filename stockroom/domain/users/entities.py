# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str
    email: str | None
    created_at: datetime


@dataclass(slots=True, frozen=True)
class Identity:
    """Who a verified session token belongs to."""

    id: int
    username: str
