"""Query and aggregation engine.

Every function here is a read-only computation over products or
transactions taken from a snapshot. Empty input yields empty collections
or zeroed totals, never an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Sequence

from invtrack.application.dto import (
    ActivityEntry,
    AlertSet,
    CategoryTotals,
    InventoryOverview,
    MovementSummary,
)
from invtrack.domain.model.product import Product
from invtrack.domain.model.state import InventoryState
from invtrack.domain.model.status import StockStatus
from invtrack.domain.model.transaction import Transaction, TransactionType
from invtrack.domain.model.value_objects import Money

DEFAULT_TOP_N = 10
DEFAULT_ALERT_LIMIT = 8
DEFAULT_RECENT_LIMIT = 10


class SortField(Enum):
    NAME = "name"
    SKU = "sku"
    CATEGORY = "category"
    SUPPLIER = "supplier"
    LOCATION = "location"
    QUANTITY = "quantity"
    MIN_STOCK = "min_stock"
    MAX_STOCK = "max_stock"
    PRICE = "price"
    STATUS = "status"
    LAST_UPDATED = "last_updated"


class SortOrder(Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class ProductQuery:
    search_text: str = ""
    category: str | None = None
    status: StockStatus | None = None
    sort_field: SortField = SortField.NAME
    sort_order: SortOrder = SortOrder.ASC


def _sort_key(product: Product, field: SortField) -> Any:
    if field is SortField.PRICE:
        return product.price.amount
    if field is SortField.STATUS:
        return product.status.value.lower()
    value = getattr(product, field.value)
    if isinstance(value, str):
        return value.lower()
    return value


def filter_and_sort(products: Iterable[Product], query: ProductQuery) -> list[Product]:
    """Search, filter and sort the catalog the way the products page does.

    Sorting is stable in both directions: products with equal keys keep
    their catalog order.
    """
    needle = query.search_text.lower()
    matches = [
        p
        for p in products
        if (needle in p.name.lower() or needle in p.sku.lower())
        and (not query.category or p.category == query.category)
        and (query.status is None or p.status is query.status)
    ]
    return sorted(
        matches,
        key=lambda p: _sort_key(p, query.sort_field),
        reverse=query.sort_order is SortOrder.DESC,
    )


def category_options(products: Iterable[Product]) -> list[str]:
    """Distinct categories in use, in first-seen order."""
    return list(dict.fromkeys(p.category for p in products))


def category_breakdown(products: Iterable[Product]) -> dict[str, CategoryTotals]:
    """Per-category count, quantity, value and status mix."""
    groups: dict[str, list[Product]] = {}
    for product in products:
        groups.setdefault(product.category, []).append(product)

    values = {
        name: sum((p.value for p in members), Money.zero())
        for name, members in groups.items()
    }
    grand_total = sum(values.values(), Money.zero())

    return {
        name: CategoryTotals(
            count=len(members),
            total_quantity=sum(p.quantity for p in members),
            total_value=values[name],
            in_stock=_count_status(members, StockStatus.IN_STOCK),
            low_stock=_count_status(members, StockStatus.LOW_STOCK),
            out_of_stock=_count_status(members, StockStatus.OUT_OF_STOCK),
            share_of_value=values[name].ratio_of(grand_total),
        )
        for name, members in groups.items()
    }


def top_products_by_value(
    products: Iterable[Product], limit: int = DEFAULT_TOP_N
) -> list[Product]:
    """Highest stock value first; equal values keep catalog order."""
    ranked = sorted(products, key=lambda p: p.value.amount, reverse=True)
    return ranked[: max(limit, 0)]


def stock_alerts(
    products: Iterable[Product], limit: int = DEFAULT_ALERT_LIMIT
) -> AlertSet:
    products = list(products)
    flagged = [p for p in products if p.status is StockStatus.OUT_OF_STOCK] + [
        p for p in products if p.status is StockStatus.LOW_STOCK
    ]
    shown = flagged[: max(limit, 0)]
    return AlertSet(items=shown, overflow=len(flagged) - len(shown))


def transaction_summary(
    transactions: Iterable[Transaction], window: timedelta, now: datetime
) -> MovementSummary:
    """Totals for ledger entries dated within *window* before *now*."""
    cutoff = now - window
    in_window = [t for t in transactions if t.date >= cutoff]
    return MovementSummary(
        window=window,
        transactions=in_window,
        stock_in=_total_moved(in_window, TransactionType.STOCK_IN),
        stock_out=_total_moved(in_window, TransactionType.STOCK_OUT),
    )


def recent_activity(
    state: InventoryState, limit: int = DEFAULT_RECENT_LIMIT
) -> list[ActivityEntry]:
    """The newest *limit* ledger entries whose product still exists.

    Entries for deleted products are dropped after the limit is applied,
    so fewer than *limit* entries may come back.
    """
    by_id = {p.id: p for p in state.products}
    return [
        ActivityEntry(transaction=t, product=by_id[t.product_id])
        for t in state.transactions[: max(limit, 0)]
        if t.product_id in by_id
    ]


def inventory_overview(products: Sequence[Product]) -> InventoryOverview:
    """Headline counts for the catalog.

    ``low_stock_items`` and ``out_of_stock_items`` are disjoint: an empty
    shelf counts only as out of stock. Their sum is the number of products
    at or below their threshold, which ``restock_ratio`` is based on.
    """
    low = _count_status(products, StockStatus.LOW_STOCK)
    out = _count_status(products, StockStatus.OUT_OF_STOCK)
    total = len(products)
    ratio = (
        (Decimal(low + out) * 100 / total).quantize(Decimal("0.01"))
        if total
        else Decimal("0")
    )
    return InventoryOverview(
        total_products=total,
        total_value=sum((p.value for p in products), Money.zero()),
        low_stock_items=low,
        out_of_stock_items=out,
        restock_ratio=ratio,
    )


def _count_status(products: Iterable[Product], status: StockStatus) -> int:
    return sum(1 for p in products if p.status is status)


def _total_moved(transactions: Iterable[Transaction], movement: TransactionType) -> int:
    return sum(t.quantity for t in transactions if t.type is movement)
