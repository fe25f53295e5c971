"""Report snapshots for a chosen date range."""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum

from invtrack.application.dto import Report
from invtrack.application.queries import (
    DEFAULT_TOP_N,
    category_breakdown,
    inventory_overview,
    top_products_by_value,
    transaction_summary,
)
from invtrack.domain.model.state import InventoryState


class DateRange(Enum):
    LAST_7_DAYS = "7days"
    LAST_30_DAYS = "30days"
    LAST_90_DAYS = "90days"

    @property
    def days(self) -> int:
        return int(self.value.removesuffix("days"))

    @property
    def label(self) -> str:
        return f"Last {self.days} Days"

    @property
    def window(self) -> timedelta:
        return timedelta(days=self.days)


def build_report(
    state: InventoryState,
    date_range: DateRange,
    now: datetime,
    top_n: int = DEFAULT_TOP_N,
) -> Report:
    """Everything the reports page shows, computed from one snapshot."""
    return Report(
        date_range_label=date_range.label,
        generated_at=now,
        overview=inventory_overview(state.products),
        movement=transaction_summary(state.transactions, date_range.window, now),
        categories=category_breakdown(state.products),
        top_products=top_products_by_value(state.products, top_n),
    )
