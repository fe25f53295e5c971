"""Actions accepted by the store.

Each action is a small immutable record describing one intended change.
The reducer is the only code that turns an action into a new snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from invtrack.domain.model.product import ProductFields
from invtrack.domain.model.state import InventoryState
from invtrack.domain.model.transaction import TransactionType


@dataclass(frozen=True)
class AddProduct:
    fields: ProductFields


@dataclass(frozen=True)
class UpdateProduct:
    product_id: str
    fields: ProductFields


@dataclass(frozen=True)
class DeleteProduct:
    product_id: str


@dataclass(frozen=True)
class AdjustStock:
    """Move stock in or out of a product and record it in the ledger.

    Blank ``notes`` are replaced with a synthesized description.
    """

    product_id: str
    type: TransactionType
    quantity: int
    notes: str = ""


@dataclass(frozen=True)
class ReplaceState:
    """Overwrite the whole snapshot (import, restore, reset)."""

    state: InventoryState


Action = Union[AddProduct, UpdateProduct, DeleteProduct, AdjustStock, ReplaceState]
