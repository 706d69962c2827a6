# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from stockroom.domain.users.entities import User
from stockroom.domain.users.exceptions import DuplicateUsernameError
from stockroom.domain.users.repositories import UserRepository
from stockroom.infrastructure.db import Database
from stockroom.infrastructure.db.models import UserRow, as_utc, fits_integer


def _to_domain(row: UserRow) -> User:
    return User(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        email=row.email,
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    def find_by_username(self, username: str) -> User | None:
        with self._db.acquire() as session:
            row = session.scalars(select(UserRow).where(UserRow.username == username)).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> User | None:
        if not fits_integer(user_id):
            return None
        with self._db.acquire() as session:
            row = session.get(UserRow, user_id)
            return _to_domain(row) if row else None

    def list_recent_first(self) -> list[User]:
        with self._db.acquire() as session:
            rows = session.scalars(
                select(UserRow).order_by(UserRow.created_at.desc(), UserRow.id.desc())
            ).all()
            return [_to_domain(row) for row in rows]

    def add(self, username: str, password_hash: str, email: str | None) -> User:
        with self._db.acquire() as session:
            row = UserRow(username=username, password_hash=password_hash, email=email)
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                raise DuplicateUsernameError(context={"username": username}) from exc
            return _to_domain(row)
