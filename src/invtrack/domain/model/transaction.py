"""Stock movement ledger entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TransactionType(Enum):
    STOCK_IN = "stock_in"
    STOCK_OUT = "stock_out"

    @property
    def verb(self) -> str:
        return "Added" if self is TransactionType.STOCK_IN else "Removed"


def default_notes(movement: TransactionType, quantity: int) -> str:
    """Note recorded when the caller leaves the notes blank."""
    return f"{movement.verb} {quantity} units"


@dataclass(frozen=True)
class Transaction:
    """A single stock movement.

    Transactions are history: they are never edited or deleted, and
    ``product_id`` may outlive the product it points at.
    """

    id: str
    product_id: str
    type: TransactionType
    quantity: int
    notes: str
    date: datetime
