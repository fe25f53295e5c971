"""Sample data used when no saved state exists, and the cleared state."""

from __future__ import annotations

from datetime import datetime

from invtrack.domain.model.product import Product
from invtrack.domain.model.state import InventoryState
from invtrack.domain.model.transaction import Transaction, TransactionType
from invtrack.domain.model.value_objects import Money

_PRODUCTS = [
    # id, name, sku, category, qty, min, max, price, supplier, location
    ("P-1", "Wireless Headphones", "WH-001", "Electronics", 45, 10, 100, "99.99", "TechCorp", "Warehouse A"),
    ("P-2", "Gaming Mouse", "GM-002", "Electronics", 8, 15, 50, "59.99", "GameTech", "Warehouse A"),
    ("P-3", "Office Chair", "OC-003", "Furniture", 0, 5, 25, "299.99", "FurniCorp", "Warehouse B"),
    ("P-4", "Notebook Set", "NB-004", "Stationery", 120, 20, 200, "12.99", "PaperPlus", "Warehouse C"),
]


def seed_state(now: datetime) -> InventoryState:
    products = tuple(
        Product(
            id=pid,
            name=name,
            sku=sku,
            category=category,
            supplier=supplier,
            location=location,
            quantity=qty,
            min_stock=min_stock,
            max_stock=max_stock,
            price=Money.of(price),
            last_updated=now,
        )
        for pid, name, sku, category, qty, min_stock, max_stock, price, supplier, location in _PRODUCTS
    )
    transactions = (
        Transaction("T-1", "P-1", TransactionType.STOCK_IN, 20, "Weekly restock", now),
        Transaction("T-2", "P-2", TransactionType.STOCK_OUT, 7, "Customer order fulfillment", now),
    )
    return InventoryState(products=products, transactions=transactions)


def cleared_state() -> InventoryState:
    """Empty catalog and ledger; the default registries are kept."""
    return InventoryState.empty()
