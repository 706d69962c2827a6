# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from stockroom.infrastructure.db import Database
from stockroom.shared.logging import logger


def check_database(database: Database) -> bool:
    try:
        database.ping()
    except SQLAlchemyError as exc:
        logger.warning(f"health: database unreachable ({type(exc).__name__})")
        return False
    return True


__all__ = ["check_database"]
