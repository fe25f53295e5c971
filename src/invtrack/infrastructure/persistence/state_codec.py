"""Conversion between InventoryState and JSON-ready dicts.

Keys follow the camelCase layout of the browser app's saved data, so old
backups (numeric ids, float prices, ``Z`` timestamps) still load.
Status is written out for readers but always re-derived on load.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from invtrack.domain.exceptions import DomainException, StateFormatError
from invtrack.domain.model.ids import PRODUCT_PREFIX, TRANSACTION_PREFIX
from invtrack.domain.model.product import Product
from invtrack.domain.model.state import DEFAULT_CATEGORIES, DEFAULT_SUPPLIERS, InventoryState
from invtrack.domain.model.transaction import Transaction, TransactionType
from invtrack.domain.model.value_objects import Money


def encode_state(state: InventoryState) -> dict[str, Any]:
    return {
        "products": [encode_product(p) for p in state.products],
        "transactions": [encode_transaction(t) for t in state.transactions],
        "categories": list(state.categories),
        "suppliers": list(state.suppliers),
    }


def decode_state(raw: Any) -> InventoryState:
    """Build a snapshot from decoded JSON.

    Raises StateFormatError on any shape problem; nothing is partially
    decoded.
    """
    if not isinstance(raw, dict):
        raise StateFormatError("Saved state must be a JSON object")
    try:
        return InventoryState(
            products=tuple(decode_product(p) for p in _list(raw, "products")),
            transactions=tuple(
                decode_transaction(t) for t in _list(raw, "transactions", default=[])
            ),
            categories=tuple(_str_list(raw, "categories", DEFAULT_CATEGORIES)),
            suppliers=tuple(_str_list(raw, "suppliers", DEFAULT_SUPPLIERS)),
        )
    except StateFormatError:
        raise
    except (AttributeError, KeyError, TypeError, ValueError, DomainException) as exc:
        raise StateFormatError(f"Malformed inventory data: {exc!r}") from exc


# --- Products -----------------------------------------------------------------

def encode_product(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "sku": product.sku,
        "category": product.category,
        "quantity": product.quantity,
        "minStock": product.min_stock,
        "maxStock": product.max_stock,
        "price": str(product.price.amount),
        "supplier": product.supplier,
        "location": product.location,
        "lastUpdated": product.last_updated.isoformat(),
        "status": product.status.value,
    }


def decode_product(raw: dict[str, Any]) -> Product:
    return Product(
        id=_id(raw["id"], PRODUCT_PREFIX),
        name=str(raw["name"]),
        sku=str(raw["sku"]),
        category=str(raw["category"]),
        supplier=str(raw["supplier"]),
        location=str(raw["location"]),
        quantity=_int(raw, "quantity"),
        min_stock=_int(raw, "minStock"),
        max_stock=_int(raw, "maxStock"),
        price=Money.of(raw["price"]),
        last_updated=_timestamp(raw["lastUpdated"]),
    )


# --- Transactions -------------------------------------------------------------

def encode_transaction(transaction: Transaction) -> dict[str, Any]:
    return {
        "id": transaction.id,
        "productId": transaction.product_id,
        "type": transaction.type.value,
        "quantity": transaction.quantity,
        "notes": transaction.notes,
        "date": transaction.date.isoformat(),
    }


def decode_transaction(raw: dict[str, Any]) -> Transaction:
    return Transaction(
        id=_id(raw["id"], TRANSACTION_PREFIX),
        product_id=_id(raw["productId"], PRODUCT_PREFIX),
        type=TransactionType(raw["type"]),
        quantity=_int(raw, "quantity"),
        notes=str(raw.get("notes") or ""),
        date=_timestamp(raw["date"]),
    )


# --- Field helpers ------------------------------------------------------------

def _list(raw: dict[str, Any], key: str, default: list | None = None) -> list:
    value = raw.get(key, default)
    if not isinstance(value, list):
        raise StateFormatError(f"'{key}' must be a list")
    return value


def _str_list(raw: dict[str, Any], key: str, default: tuple[str, ...]) -> list[str]:
    values = _list(raw, key, default=list(default))
    if not all(isinstance(v, str) for v in values):
        raise StateFormatError(f"'{key}' must contain only text")
    return values


def _int(raw: dict[str, Any], key: str) -> int:
    value = raw[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise StateFormatError(f"'{key}' must be an integer, got {value!r}")
    if value < 0:
        raise StateFormatError(f"'{key}' cannot be negative, got {value}")
    return value


def _timestamp(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _id(value: Any, prefix: str) -> str:
    # Bare numeric ids from the browser app share one number space across
    # products and transactions; the prefix keeps them apart.
    if isinstance(value, int) and not isinstance(value, bool):
        return f"{prefix}{value}"
    if not isinstance(value, str):
        raise StateFormatError(f"Invalid id {value!r}")
    return value
