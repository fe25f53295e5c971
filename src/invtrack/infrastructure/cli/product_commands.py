"""CLI commands for the product catalog."""

from __future__ import annotations

from dataclasses import replace

import click

from invtrack.application.queries import ProductQuery, SortField, SortOrder, filter_and_sort
from invtrack.application.validation import validate_product
from invtrack.domain.actions import AddProduct, DeleteProduct, UpdateProduct
from invtrack.domain.exceptions import DomainException
from invtrack.domain.model.product import ProductFields
from invtrack.domain.model.status import StockStatus
from invtrack.domain.model.value_objects import Money
from invtrack.infrastructure.bootstrap import open_store
from invtrack.infrastructure.cli.common import echo_product_table, require_product
from invtrack.infrastructure.config import Settings

_STATUS_CHOICES = {s.name.lower().replace("_", "-"): s for s in StockStatus}


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--sku", required=True, help="Stock keeping unit.")
@click.option("--category", required=True, help="Category.")
@click.option("--supplier", required=True, help="Supplier.")
@click.option("--location", required=True, help="Storage location.")
@click.option("--quantity", default=0, type=int, show_default=True, help="Units on hand.")
@click.option("--min-stock", default=0, type=int, show_default=True, help="Reorder threshold.")
@click.option("--max-stock", default=0, type=int, show_default=True, help="Stock ceiling.")
@click.option("--price", required=True, help="Unit price (e.g. 15.00).")
@click.pass_obj
def product_add(settings: Settings, price: str, **text_and_counts) -> None:
    """Add a new product to the catalog."""
    store = open_store(settings)

    try:
        fields = ProductFields(price=Money.of(price), **text_and_counts)
        validate_product(fields)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    state = store.dispatch(AddProduct(fields))
    product = state.products[-1]
    click.echo(f"Product {product.id} '{product.name}' added ({product.status.value})")


@click.command("list")
@click.option("--search", default="", help="Match against name or SKU.")
@click.option("--category", default=None, help="Only this category.")
@click.option("--status", type=click.Choice(sorted(_STATUS_CHOICES)), default=None)
@click.option(
    "--sort",
    "sort_field",
    type=click.Choice([f.value for f in SortField]),
    default=SortField.NAME.value,
    show_default=True,
)
@click.option("--desc", is_flag=True, default=False, help="Sort descending.")
@click.pass_obj
def product_list(
    settings: Settings,
    search: str,
    category: str | None,
    status: str | None,
    sort_field: str,
    desc: bool,
) -> None:
    """List products, optionally filtered and sorted."""
    store = open_store(settings)
    query = ProductQuery(
        search_text=search,
        category=category,
        status=_STATUS_CHOICES[status] if status else None,
        sort_field=SortField(sort_field),
        sort_order=SortOrder.DESC if desc else SortOrder.ASC,
    )
    products = filter_and_sort(store.state.products, query)

    if not products:
        click.echo("No products found.")
        return
    echo_product_table(products)


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(settings: Settings, product_id: str) -> None:
    """Show every field of one product."""
    store = open_store(settings)

    try:
        p = require_product(store.state, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {p.id}  ({p.status.value})")
    click.echo(f"Name:      {p.name}")
    click.echo(f"SKU:       {p.sku}")
    click.echo(f"Category:  {p.category}")
    click.echo(f"Supplier:  {p.supplier}")
    click.echo(f"Location:  {p.location}")
    click.echo(f"Stock:     {p.quantity} (min {p.min_stock}, max {p.max_stock})")
    click.echo(f"Price:     {p.price}")
    click.echo(f"Value:     {p.value}")
    click.echo(f"Updated:   {p.last_updated.isoformat()}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None)
@click.option("--sku", default=None)
@click.option("--category", default=None)
@click.option("--supplier", default=None)
@click.option("--location", default=None)
@click.option("--quantity", default=None, type=int)
@click.option("--min-stock", default=None, type=int)
@click.option("--max-stock", default=None, type=int)
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.pass_obj
def product_update(settings: Settings, product_id: str, price: str | None, **changes) -> None:
    """Edit a product; omitted options keep their current value."""
    store = open_store(settings)

    try:
        current = require_product(store.state, product_id).fields
        merged = {k: v for k, v in changes.items() if v is not None}
        if price is not None:
            merged["price"] = Money.of(price)
        fields = replace(current, **merged)
        validate_product(fields)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    state = store.dispatch(UpdateProduct(product_id, fields))
    updated = state.product_by_id(product_id)
    click.echo(f"Product {product_id} updated ({updated.status.value})")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(settings: Settings, product_id: str) -> None:
    """Remove a product; its stock history is kept."""
    store = open_store(settings)

    try:
        product = require_product(store.state, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    store.dispatch(DeleteProduct(product_id))
    click.echo(f"Product {product_id} '{product.name}' deleted")
