"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import click

from invtrack.domain.exceptions import EntityNotFoundError
from invtrack.domain.model.product import Product
from invtrack.domain.model.state import InventoryState


def require_product(state: InventoryState, product_id: str) -> Product:
    product = state.product_by_id(product_id)
    if product is None:
        raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
    return product


def echo_product_table(products: list[Product]) -> None:
    click.echo(
        f"{'ID':<12} {'Name':<24} {'SKU':<10} {'Category':<14} "
        f"{'Qty':>6} {'Price':>10}  Status"
    )
    click.echo("-" * 92)
    for p in products:
        click.echo(
            f"{p.id[:12]:<12} {p.name[:24]:<24} {p.sku[:10]:<10} {p.category[:14]:<14} "
            f"{p.quantity:>6} {str(p.price):>10}  {p.status.value}"
        )
