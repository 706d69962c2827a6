# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Connection pool, schema bootstrap and readiness for the relational store."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps
from typing import Any, TypeVar

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from stockroom.shared.config import DatabaseConfig
from stockroom.shared.errors import ServiceUnavailableError
from stockroom.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])

_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


class Base(DeclarativeBase):
    pass


def _build_engine(config: DatabaseConfig, production: bool) -> Engine:
    url = config.resolved_url()

    if url in _MEMORY_URLS:
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    connect_args: dict[str, object] = {}
    if url.startswith("sqlite"):
        connect_args = {
            "check_same_thread": False,
            "timeout": int(config.pool_timeout),
        }
    else:
        if config.wants_ssl(production):
            connect_args["sslmode"] = "require"
        if config.statement_timeout_ms:
            connect_args["options"] = f"-c statement_timeout={config.statement_timeout_ms}"

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.pool_timeout,
        connect_args=connect_args,
    )


def _set_sqlite_pragmas(dbapi_conn, _record) -> None:
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA foreign_keys=ON;")
        cur.execute("PRAGMA busy_timeout=30000;")
    finally:
        cur.close()


class Database:
    """Owns the engine and its pool, creates the schema and tracks readiness.

    ``initialize()`` never raises for an unreachable database: it logs the
    failure and leaves the service not ready, so the process keeps serving
    503s instead of crashing.
    """

    def __init__(self, config: DatabaseConfig, *, production: bool = False) -> None:
        self._engine = _build_engine(config, production)
        if self._engine.dialect.name == "sqlite":
            event.listen(self._engine, "connect", _set_sqlite_pragmas)
        self._sessions = sessionmaker(
            bind=self._engine, autoflush=False, expire_on_commit=False
        )
        self._ready = threading.Event()
        self._init_lock = threading.Lock()

    def initialize(self) -> bool:
        # Imported for the side effect of registering the tables on Base.
        from stockroom.infrastructure.db import models  # noqa: F401

        try:
            Base.metadata.create_all(bind=self._engine)
        except SQLAlchemyError as exc:
            self._ready.clear()
            logger.error(f"db.init: failed, service not ready ({type(exc).__name__}: {exc})")
            return False

        self._ready.set()
        logger.info(f"db.init: schema ensured on {self._engine.url.render_as_string()}")
        return True

    def is_ready(self) -> bool:
        return self._ready.is_set()

    def ensure_ready(self) -> bool:
        """Retry the schema bootstrap when the database came up after start-up."""

        if self._ready.is_set():
            return True
        with self._init_lock:
            return self._ready.is_set() or self.initialize()

    @contextmanager
    def acquire(self) -> Iterator[Session]:
        """Check a session out of the pool for one unit of work.

        Commits when the block exits normally, rolls back on any exception,
        and always returns the connection to the pool.
        """

        session = self._sessions()
        logger.debug("db.session: opened")
        try:
            yield session
            session.commit()
            logger.debug("db.session: committed")
        except Exception as exc:
            session.rollback()
            logger.debug(f"db.session: rolled back ({type(exc).__name__})")
            raise
        finally:
            session.close()

    def ping(self) -> None:
        with self._engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def requires_ready(self, view: F) -> F:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            if not self.ensure_ready():
                raise ServiceUnavailableError()
            return view(*args, **kwargs)

        return inner  # type: ignore[return-value]

    def dispose(self) -> None:
        self._engine.dispose()
        logger.info("db.pool: disposed")
