# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from stockroom.shared.errors.base import DomainError


class ProductNotFoundError(DomainError):
    code = "PRODUCT_NOT_FOUND"
    status = HTTPStatus.NOT_FOUND
    message = "Product not found"

    def __init__(self, product_id: int) -> None:
        super().__init__(context={"product_id": product_id})
