"""CLI commands for backup, restore and reset."""

from __future__ import annotations

from pathlib import Path

import click

from invtrack.application.queries import inventory_overview
from invtrack.application.store import utc_now
from invtrack.domain.actions import ReplaceState
from invtrack.domain.exceptions import DomainException
from invtrack.infrastructure.bootstrap import open_store
from invtrack.infrastructure.config import Settings
from invtrack.infrastructure.exchange import backup_filename, export_backup, import_backup
from invtrack.infrastructure.seed import cleared_state


@click.command("export")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="File to write (default: inventory-backup-<date>.json).",
)
@click.pass_obj
def data_export(settings: Settings, output: str | None) -> None:
    """Write a full backup of products, transactions and registries."""
    now = utc_now()
    target = Path(output) if output else Path(backup_filename(now))
    target.write_text(export_backup(open_store(settings).state, now), encoding="utf-8")
    click.echo(f"Backup written to {target}")


@click.command("import")
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def data_import(settings: Settings, source: str) -> None:
    """Replace all data with the contents of a backup file."""
    store = open_store(settings)

    try:
        action = import_backup(Path(source).read_bytes())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    store.dispatch(action)
    click.echo(
        f"Data imported successfully! ({len(action.state.products)} products, "
        f"{len(action.state.transactions)} transactions)"
    )


@click.command("reset")
@click.confirmation_option(prompt="This permanently deletes all products and transactions. Continue?")
@click.pass_obj
def data_reset(settings: Settings) -> None:
    """Clear every product and transaction."""
    open_store(settings).dispatch(ReplaceState(cleared_state()))
    click.echo("All data has been cleared successfully!")


@click.command("stats")
@click.pass_obj
def data_stats(settings: Settings) -> None:
    """Record counts and stock warnings."""
    state = open_store(settings).state
    overview = inventory_overview(state.products)

    click.echo(f"Products:      {len(state.products)}")
    click.echo(f"Transactions:  {len(state.transactions)}")
    click.echo(f"Categories:    {len(state.categories)}")
    click.echo(f"Suppliers:     {len(state.suppliers)}")
    if overview.low_stock_items:
        click.echo(f"{overview.low_stock_items} items need restocking")
    if overview.out_of_stock_items:
        click.echo(f"{overview.out_of_stock_items} items are completely out of stock")
