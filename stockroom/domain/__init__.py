# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .products.entities import MUTABLE_PRODUCT_FIELDS, Product, ProductDraft, select_mutable_fields
from .users.entities import Identity, User

__all__ = [
    "Identity",
    "MUTABLE_PRODUCT_FIELDS",
    "Product",
    "ProductDraft",
    "User",
    "select_mutable_fields",
]
