"""Stock status classification."""

from __future__ import annotations

from enum import Enum


class StockStatus(Enum):
    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"


def derive_status(quantity: int, min_stock: int) -> StockStatus:
    """Classify a stock level against its reorder threshold.

    Nothing on hand is out of stock; anything at or below the threshold is
    low; the rest is in stock.
    """
    if quantity <= 0:
        return StockStatus.OUT_OF_STOCK
    if quantity <= min_stock:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK
