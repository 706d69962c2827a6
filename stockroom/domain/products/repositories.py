# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from .entities import Product, ProductDraft


class ProductRepository(Protocol):
    def list_recent_first(self) -> Sequence[Product]: ...
    def find_by_id(self, product_id: int) -> Product | None: ...
    def add_many(self, drafts: Sequence[ProductDraft]) -> list[Product]: ...
    def replace(self, product_id: int, draft: ProductDraft) -> Product | None: ...
    def update_fields(self, product_id: int, changes: Mapping[str, Any]) -> Product | None: ...
    def delete(self, product_id: int) -> Product | None: ...
