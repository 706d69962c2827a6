# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from stockroom.domain.products.entities import Product
from stockroom.domain.products.exceptions import ProductNotFoundError
from stockroom.domain.products.repositories import ProductRepository


class DeleteProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_id: int) -> Product:
        deleted = self._products.delete(product_id)
        if deleted is None:
            raise ProductNotFoundError(product_id)
        return deleted
