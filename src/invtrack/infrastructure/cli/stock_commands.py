"""CLI commands for stock movements."""

from __future__ import annotations

import click

from invtrack.application.validation import validate_adjustment
from invtrack.domain.actions import AdjustStock
from invtrack.domain.exceptions import DomainException
from invtrack.domain.model.transaction import TransactionType
from invtrack.infrastructure.bootstrap import open_store
from invtrack.infrastructure.cli.common import require_product
from invtrack.infrastructure.config import Settings


def _adjust(settings: Settings, product_id: str, movement: TransactionType, quantity: int, notes: str) -> None:
    store = open_store(settings)

    try:
        product = require_product(store.state, product_id)
        validate_adjustment(product, movement, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    state = store.dispatch(AdjustStock(product_id, movement, quantity, notes))
    updated = state.product_by_id(product_id)
    click.echo(
        f"{state.transactions[0].notes}: '{updated.name}' now at "
        f"{updated.quantity} ({updated.status.value})"
    )


_product_option = click.option("--id", "product_id", required=True, help="Product ID.")
_quantity_option = click.option("--quantity", required=True, type=int, help="Units moved.")
_notes_option = click.option("--notes", default="", help="Free-text note for the ledger.")


@click.command("in")
@_product_option
@_quantity_option
@_notes_option
@click.pass_obj
def stock_in(settings: Settings, product_id: str, quantity: int, notes: str) -> None:
    """Receive stock for a product."""
    _adjust(settings, product_id, TransactionType.STOCK_IN, quantity, notes)


@click.command("out")
@_product_option
@_quantity_option
@_notes_option
@click.pass_obj
def stock_out(settings: Settings, product_id: str, quantity: int, notes: str) -> None:
    """Remove stock from a product."""
    _adjust(settings, product_id, TransactionType.STOCK_OUT, quantity, notes)
