# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import select, update

from stockroom.domain.products.entities import MUTABLE_PRODUCT_FIELDS, Product, ProductDraft
from stockroom.domain.products.repositories import ProductRepository
from stockroom.infrastructure.db import Database
from stockroom.infrastructure.db.models import ProductRow, as_utc, fits_integer, utcnow
from stockroom.shared.logging import logger


def _to_domain(row: ProductRow) -> Product:
    return Product(
        product_id=row.product_id,
        product_name=row.product_name,
        description=row.description or "",
        quantity=row.quantity,
        price=row.price,
        currentstamp=as_utc(row.currentstamp),
    )


class SqlAlchemyProductRepository(ProductRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    def list_recent_first(self) -> list[Product]:
        with self._db.acquire() as session:
            rows = session.scalars(
                select(ProductRow).order_by(
                    ProductRow.currentstamp.desc(), ProductRow.product_id.desc()
                )
            ).all()
            return [_to_domain(row) for row in rows]

    def find_by_id(self, product_id: int) -> Product | None:
        if not fits_integer(product_id):
            return None
        with self._db.acquire() as session:
            row = session.get(ProductRow, product_id)
            return _to_domain(row) if row else None

    def add_many(self, drafts: Sequence[ProductDraft]) -> list[Product]:
        # One session, one transaction: a failing insert rolls back the batch.
        with self._db.acquire() as session:
            rows = [ProductRow(**draft.as_values()) for draft in drafts]
            for row in rows:
                session.add(row)
                session.flush()
            logger.debug(f"products.insert: flushed n={len(rows)}")
            return [_to_domain(row) for row in rows]

    def replace(self, product_id: int, draft: ProductDraft) -> Product | None:
        if not fits_integer(product_id):
            return None
        with self._db.acquire() as session:
            row = session.get(ProductRow, product_id)
            if row is None:
                return None
            for column, value in draft.as_values().items():
                setattr(row, column, value)
            row.currentstamp = utcnow()
            session.flush()
            return _to_domain(row)

    def update_fields(self, product_id: int, changes: Mapping[str, Any]) -> Product | None:
        unknown = set(changes) - MUTABLE_PRODUCT_FIELDS
        if unknown:
            raise ValueError(f"not updatable: {sorted(unknown)}")
        if not fits_integer(product_id):
            return None

        columns = ProductRow.__table__.c
        values: dict[Any, Any] = {columns[name]: value for name, value in changes.items()}
        values[columns["currentstamp"]] = utcnow()

        with self._db.acquire() as session:
            result = session.execute(
                update(ProductRow)
                .where(ProductRow.product_id == product_id)
                .values(values)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                return None
            row = session.get(ProductRow, product_id)
            return _to_domain(row) if row else None

    def delete(self, product_id: int) -> Product | None:
        if not fits_integer(product_id):
            return None
        with self._db.acquire() as session:
            row = session.get(ProductRow, product_id)
            if row is None:
                return None
            snapshot = _to_domain(row)
            session.delete(row)
            return snapshot
