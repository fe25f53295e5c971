"""InventoryState: the full domain snapshot held by the store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from invtrack.domain.model.product import Product
from invtrack.domain.model.transaction import Transaction

DEFAULT_CATEGORIES = ("Electronics", "Furniture", "Stationery", "Clothing", "Books")
DEFAULT_SUPPLIERS = ("TechCorp", "GameTech", "FurniCorp", "PaperPlus", "StyleCorp")


def _ordered_unique(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


@dataclass(frozen=True)
class InventoryState:
    """Immutable snapshot of everything the store owns.

    ``transactions`` is the ledger, newest first by insertion.
    ``categories`` and ``suppliers`` are ordered registries used for
    selection lists and grouping; products may reference values that are
    not registered.
    """

    products: tuple[Product, ...] = ()
    transactions: tuple[Transaction, ...] = ()
    categories: tuple[str, ...] = DEFAULT_CATEGORIES
    suppliers: tuple[str, ...] = DEFAULT_SUPPLIERS

    def __post_init__(self) -> None:
        object.__setattr__(self, "products", tuple(self.products))
        object.__setattr__(self, "transactions", tuple(self.transactions))
        object.__setattr__(self, "categories", _ordered_unique(self.categories))
        object.__setattr__(self, "suppliers", _ordered_unique(self.suppliers))

    def product_by_id(self, product_id: str) -> Product | None:
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    @classmethod
    def empty(
        cls,
        categories: Iterable[str] = DEFAULT_CATEGORIES,
        suppliers: Iterable[str] = DEFAULT_SUPPLIERS,
    ) -> InventoryState:
        return cls(categories=tuple(categories), suppliers=tuple(suppliers))
