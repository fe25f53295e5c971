"""Product aggregate.

Products are immutable snapshots. Every change produces a new Product,
and the stock status is derived during construction, so a product whose
status disagrees with its quantity cannot be built.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime

from invtrack.domain.model.status import StockStatus, derive_status
from invtrack.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductFields:
    """Caller-editable part of a product (everything except id, status
    and the update timestamp)."""

    name: str
    sku: str
    category: str
    supplier: str
    location: str
    quantity: int
    min_stock: int
    max_stock: int
    price: Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    ``quantity`` is clamped at zero and ``status`` is not an init
    argument: it is recomputed from ``quantity`` and ``min_stock``
    whenever a Product is created, including through
    ``dataclasses.replace``.
    """

    id: str
    name: str
    sku: str
    category: str
    supplier: str
    location: str
    quantity: int
    min_stock: int
    max_stock: int
    price: Money
    last_updated: datetime
    status: StockStatus = field(init=False)

    def __post_init__(self) -> None:
        # Stock on hand is never negative, whichever path built the product.
        object.__setattr__(self, "quantity", max(0, self.quantity))
        object.__setattr__(self, "status", derive_status(self.quantity, self.min_stock))

    @classmethod
    def create(cls, product_id: str, fields: ProductFields, at: datetime) -> Product:
        return cls(
            id=product_id,
            name=fields.name,
            sku=fields.sku,
            category=fields.category,
            supplier=fields.supplier,
            location=fields.location,
            quantity=fields.quantity,
            min_stock=fields.min_stock,
            max_stock=fields.max_stock,
            price=fields.price,
            last_updated=at,
        )

    @property
    def value(self) -> Money:
        """Stock value on hand: price times quantity."""
        return self.price * self.quantity

    @property
    def fields(self) -> ProductFields:
        return ProductFields(
            name=self.name,
            sku=self.sku,
            category=self.category,
            supplier=self.supplier,
            location=self.location,
            quantity=self.quantity,
            min_stock=self.min_stock,
            max_stock=self.max_stock,
            price=self.price,
        )

    def with_fields(self, fields: ProductFields, at: datetime) -> Product:
        """Replace every editable field, keeping the id."""
        return Product.create(self.id, fields, at)

    def stocked_in(self, quantity: int, at: datetime) -> Product:
        return replace(self, quantity=max(0, self.quantity + quantity), last_updated=at)

    def stocked_out(self, quantity: int, at: datetime) -> Product:
        """Remove stock; never drops below zero."""
        return replace(self, quantity=max(0, self.quantity - quantity), last_updated=at)
