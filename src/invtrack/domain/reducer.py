"""The reducer: (snapshot, action) -> new snapshot.

Pure apart from the injected clock and id generator. Lookup misses return
the incoming snapshot unchanged; nothing here validates field content,
that is done by the caller before dispatch.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Callable

from invtrack.domain.actions import (
    Action,
    AddProduct,
    AdjustStock,
    DeleteProduct,
    ReplaceState,
    UpdateProduct,
)
from invtrack.domain.model.ids import IdGenerator
from invtrack.domain.model.product import Product
from invtrack.domain.model.state import InventoryState
from invtrack.domain.model.transaction import Transaction, TransactionType, default_notes

Clock = Callable[[], datetime]


def reduce(
    state: InventoryState,
    action: Action,
    *,
    clock: Clock,
    ids: IdGenerator,
) -> InventoryState:
    """Apply *action* to *state* and return the resulting snapshot."""
    if isinstance(action, AddProduct):
        product = Product.create(ids.new_product_id(), action.fields, clock())
        return replace(state, products=state.products + (product,))

    if isinstance(action, UpdateProduct):
        if state.product_by_id(action.product_id) is None:
            return state
        now = clock()
        return replace(
            state,
            products=tuple(
                p.with_fields(action.fields, now) if p.id == action.product_id else p
                for p in state.products
            ),
        )

    if isinstance(action, DeleteProduct):
        remaining = tuple(p for p in state.products if p.id != action.product_id)
        if len(remaining) == len(state.products):
            return state
        return replace(state, products=remaining)

    if isinstance(action, AdjustStock):
        return _adjust_stock(state, action, clock(), ids)

    if isinstance(action, ReplaceState):
        return action.state

    raise TypeError(f"Unknown action: {type(action).__name__}")


def _adjust_stock(
    state: InventoryState,
    action: AdjustStock,
    now: datetime,
    ids: IdGenerator,
) -> InventoryState:
    # Unknown product: reject the whole action, no orphan ledger entry.
    if state.product_by_id(action.product_id) is None:
        return state

    def adjusted(product: Product) -> Product:
        if action.type is TransactionType.STOCK_IN:
            return product.stocked_in(action.quantity, now)
        return product.stocked_out(action.quantity, now)

    transaction = Transaction(
        id=ids.new_transaction_id(),
        product_id=action.product_id,
        type=action.type,
        quantity=action.quantity,
        notes=action.notes.strip() or default_notes(action.type, action.quantity),
        date=now,
    )
    return replace(
        state,
        products=tuple(
            adjusted(p) if p.id == action.product_id else p for p in state.products
        ),
        transactions=(transaction,) + state.transactions,
    )
