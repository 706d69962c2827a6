# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from stockroom.domain.products.entities import Product, ProductDraft
from stockroom.domain.products.repositories import ProductRepository


class CreateProductsUseCase:
    """Insert a batch of products atomically: all rows or none."""

    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, drafts: Sequence[ProductDraft]) -> list[Product]:
        if not drafts:
            return []
        return self._products.add_many(drafts)
