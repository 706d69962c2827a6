# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any

# Columns a client may write. product_id and currentstamp are server-owned.
MUTABLE_PRODUCT_FIELDS: frozenset[str] = frozenset(
    {"product_name", "description", "quantity", "price"}
)


@dataclass(slots=True, frozen=True)
class Product:

    product_id: int
    product_name: str
    description: str
    quantity: int
    price: Decimal
    currentstamp: datetime


@dataclass(slots=True, frozen=True)
class ProductDraft:
    """Full set of writable product fields, used for inserts and replaces."""

    product_name: str
    price: Decimal
    quantity: int = 0
    description: str = ""

    def as_values(self) -> dict[str, Any]:
        return {
            "product_name": self.product_name,
            "description": self.description,
            "quantity": self.quantity,
            "price": self.price,
        }


def select_mutable_fields(updates: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only allow-listed column names from a caller-supplied mapping."""

    return {key: value for key, value in updates.items() if key in MUTABLE_PRODUCT_FIELDS}
