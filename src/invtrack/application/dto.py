"""Data Transfer Objects returned by the query engine.

Plain frozen containers so presentation code can read aggregates without
reaching back into the snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal

from invtrack.domain.model.product import Product
from invtrack.domain.model.transaction import Transaction
from invtrack.domain.model.value_objects import Money


@dataclass(frozen=True)
class CategoryTotals:
    count: int
    total_quantity: int
    total_value: Money
    in_stock: int = 0
    low_stock: int = 0
    out_of_stock: int = 0
    share_of_value: Decimal = Decimal("0")  # percent of overall stock value


@dataclass(frozen=True)
class AlertSet:
    """Products needing attention, out-of-stock first.

    ``overflow`` counts the items that did not fit under the display limit.
    """

    items: list[Product]
    overflow: int


@dataclass(frozen=True)
class MovementSummary:
    window: timedelta
    transactions: list[Transaction]
    stock_in: int
    stock_out: int

    @property
    def net_movement(self) -> int:
        return self.stock_in - self.stock_out


@dataclass(frozen=True)
class ActivityEntry:
    transaction: Transaction
    product: Product


@dataclass(frozen=True)
class InventoryOverview:
    total_products: int
    total_value: Money
    low_stock_items: int
    out_of_stock_items: int
    restock_ratio: Decimal  # percent of products needing attention


@dataclass(frozen=True)
class Report:
    """Snapshot of the reports page for one date range."""

    date_range_label: str
    generated_at: datetime
    overview: InventoryOverview
    movement: MovementSummary
    categories: dict[str, CategoryTotals]
    top_products: list[Product]
