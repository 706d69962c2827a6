# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from stockroom.domain.products.entities import Product, ProductDraft, select_mutable_fields
from stockroom.domain.products.exceptions import ProductNotFoundError
from stockroom.domain.products.repositories import ProductRepository


class ReplaceProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_id: int, draft: ProductDraft) -> Product:
        updated = self._products.replace(product_id, draft)
        if updated is None:
            raise ProductNotFoundError(product_id)
        return updated


class PatchProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_id: int, updates: Mapping[str, Any]) -> Product:
        current = self._products.find_by_id(product_id)
        if current is None:
            raise ProductNotFoundError(product_id)

        changes = select_mutable_fields(updates)
        if not changes:
            return current

        updated = self._products.update_fields(product_id, changes)
        if updated is None:
            # Deleted between the read and the write.
            raise ProductNotFoundError(product_id)
        return updated
