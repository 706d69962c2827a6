# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from stockroom.domain.products.entities import Product
from stockroom.domain.products.exceptions import ProductNotFoundError
from stockroom.domain.products.repositories import ProductRepository


class ListProductsUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self) -> Sequence[Product]:
        return self._products.list_recent_first()


class GetProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_id: int) -> Product:
        product = self._products.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
