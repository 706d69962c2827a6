# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bulk replace and delete.

Each item runs in its own transaction through the singular use case, so a
failing item never undoes the ones that succeeded before it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from stockroom.domain.products.entities import Product, ProductDraft
from stockroom.domain.products.exceptions import ProductNotFoundError
from stockroom.shared.errors.base import AppError

from .delete_product import DeleteProductUseCase
from .update_product import ReplaceProductUseCase


@dataclass(slots=True)
class ItemFailure:
    product_id: int | None
    error: str
    message: str


@dataclass(slots=True)
class BulkReplaceResult:
    updated: list[Product] = field(default_factory=list)
    failed: list[ItemFailure] = field(default_factory=list)


@dataclass(slots=True)
class BulkDeleteResult:
    deleted: list[Product] = field(default_factory=list)
    not_found: list[int] = field(default_factory=list)


class BulkReplaceProductsUseCase:
    def __init__(self, *, replace: ReplaceProductUseCase) -> None:
        self._replace = replace

    def execute(
        self,
        items: Sequence[tuple[int, ProductDraft]],
        rejected: Sequence[ItemFailure] = (),
    ) -> BulkReplaceResult:
        result = BulkReplaceResult(failed=list(rejected))
        for product_id, draft in items:
            try:
                result.updated.append(self._replace.execute(product_id, draft))
            except AppError as exc:
                result.failed.append(
                    ItemFailure(product_id=product_id, error=exc.code, message=exc.message)
                )
        return result


class BulkDeleteProductsUseCase:
    def __init__(self, *, delete: DeleteProductUseCase) -> None:
        self._delete = delete

    def execute(self, product_ids: Sequence[int]) -> BulkDeleteResult:
        result = BulkDeleteResult()
        for product_id in dict.fromkeys(product_ids):
            try:
                result.deleted.append(self._delete.execute(product_id))
            except ProductNotFoundError:
                result.not_found.append(product_id)
        return result
