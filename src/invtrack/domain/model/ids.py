"""Identifier generation for products and transactions."""

from __future__ import annotations

import uuid

PRODUCT_PREFIX = "P-"
TRANSACTION_PREFIX = "T-"


class IdGenerator:
    """Hands out opaque ids.

    Products and transactions use different prefixes so the two id spaces
    can never collide, and uuid4 keeps ids unique across restarts.
    """

    def new_product_id(self) -> str:
        return f"{PRODUCT_PREFIX}{uuid.uuid4().hex}"

    def new_transaction_id(self) -> str:
        return f"{TRANSACTION_PREFIX}{uuid.uuid4().hex}"
