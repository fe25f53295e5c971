"""Import and export of user-facing JSON documents.

Backups carry the whole snapshot; reports carry one computed Report.
Importing is all-or-nothing: the document either becomes a ReplaceState
action or is rejected with ImportFormatError.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from invtrack.application.dto import CategoryTotals, Report
from invtrack.domain.actions import ReplaceState
from invtrack.domain.exceptions import ImportFormatError, StateFormatError
from invtrack.domain.model.state import InventoryState
from invtrack.infrastructure.persistence.state_codec import (
    decode_state,
    encode_product,
    encode_state,
    encode_transaction,
)

INVALID_BACKUP = "Invalid file format. Please select a valid backup file."
UNREADABLE_BACKUP = "Error importing data. Please check the file format."


def export_backup(state: InventoryState, exported_at: datetime) -> str:
    document = encode_state(state)
    document["exportedAt"] = exported_at.isoformat()
    return _dump(document)


def import_backup(text: str | bytes) -> ReplaceState:
    try:
        raw = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ImportFormatError(UNREADABLE_BACKUP) from exc

    if not isinstance(raw, dict) or not isinstance(raw.get("products"), list):
        raise ImportFormatError(INVALID_BACKUP)

    try:
        state = decode_state(raw)
    except StateFormatError as exc:
        raise ImportFormatError(f"{UNREADABLE_BACKUP} ({exc})") from exc
    return ReplaceState(state)


def export_report(report: Report) -> str:
    return _dump(
        {
            "generatedAt": report.generated_at.isoformat(),
            "dateRange": report.date_range_label,
            "data": {
                "overview": {
                    "totalProducts": report.overview.total_products,
                    "totalValue": str(report.overview.total_value.amount),
                    "lowStockItems": report.overview.low_stock_items,
                    "outOfStockItems": report.overview.out_of_stock_items,
                    "stockIn": report.movement.stock_in,
                    "stockOut": report.movement.stock_out,
                    "netMovement": report.movement.net_movement,
                },
                "categories": [
                    _encode_category(name, totals)
                    for name, totals in report.categories.items()
                ],
                "topProducts": [encode_product(p) for p in report.top_products],
                "transactions": [
                    encode_transaction(t) for t in report.movement.transactions
                ],
            },
        }
    )


def backup_filename(at: datetime) -> str:
    return f"inventory-backup-{at:%Y-%m-%d}.json"


def report_filename(at: datetime) -> str:
    return f"inventory-report-{at:%Y-%m-%d}.json"


def _encode_category(name: str, totals: CategoryTotals) -> dict[str, Any]:
    return {
        "name": name,
        "count": totals.count,
        "quantity": totals.total_quantity,
        "value": str(totals.total_value.amount),
        "inStock": totals.in_stock,
        "lowStock": totals.low_stock,
        "outOfStock": totals.out_of_stock,
        "shareOfValue": str(totals.share_of_value),
    }


def _dump(document: dict[str, Any]) -> str:
    return json.dumps(document, indent=2) + "\n"
