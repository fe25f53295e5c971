"""Input checks run by presentation code before dispatching an action.

The store trusts what it is given; these functions are where bad form
input is turned into user-facing messages.
"""

from __future__ import annotations

from invtrack.domain.exceptions import FormValidationError
from invtrack.domain.model.product import Product, ProductFields
from invtrack.domain.model.transaction import TransactionType

_REQUIRED_TEXT = {
    "name": "Product name is required",
    "sku": "SKU is required",
    "category": "Category is required",
    "supplier": "Supplier is required",
    "location": "Location is required",
}


def validate_product(fields: ProductFields) -> None:
    """Raise FormValidationError listing every invalid field."""
    errors: dict[str, str] = {}

    for name, message in _REQUIRED_TEXT.items():
        if not getattr(fields, name).strip():
            errors[name] = message

    if fields.quantity < 0:
        errors["quantity"] = "Quantity cannot be negative"
    if fields.min_stock < 0:
        errors["min_stock"] = "Min stock cannot be negative"
    if fields.max_stock < fields.min_stock:
        errors["max_stock"] = "Max stock must be greater than min stock"
    if fields.price.amount <= 0:
        errors["price"] = "Price must be greater than 0"

    if errors:
        raise FormValidationError(errors)


def validate_adjustment(product: Product, movement: TransactionType, quantity: int) -> None:
    if quantity <= 0:
        raise FormValidationError({"quantity": "Quantity must be greater than 0"})
    if movement is TransactionType.STOCK_OUT and quantity > product.quantity:
        raise FormValidationError(
            {"quantity": "Cannot remove more items than currently in stock"}
        )
