"""CLI commands for reports and dashboards."""

from __future__ import annotations

from pathlib import Path

import click

from invtrack.application.queries import (
    category_breakdown,
    inventory_overview,
    recent_activity,
    stock_alerts,
    top_products_by_value,
    transaction_summary,
)
from invtrack.application.reports import DateRange, build_report
from invtrack.application.store import utc_now
from invtrack.domain.model.transaction import TransactionType
from invtrack.infrastructure.bootstrap import open_store
from invtrack.infrastructure.cli.common import echo_product_table
from invtrack.infrastructure.config import Settings
from invtrack.infrastructure.exchange import export_report, report_filename

_range_option = click.option(
    "--range",
    "date_range",
    type=click.Choice([r.value for r in DateRange]),
    default=DateRange.LAST_7_DAYS.value,
    show_default=True,
)


@click.command("overview")
@click.pass_obj
def report_overview(settings: Settings) -> None:
    """Headline numbers for the whole catalog."""
    overview = inventory_overview(open_store(settings).state.products)

    click.echo(f"Total products:   {overview.total_products}")
    click.echo(f"Inventory value:  {overview.total_value}")
    click.echo(f"Low stock:        {overview.low_stock_items}")
    click.echo(f"Out of stock:     {overview.out_of_stock_items}")
    click.echo(f"Needing restock:  {overview.restock_ratio}%")


@click.command("categories")
@click.pass_obj
def report_categories(settings: Settings) -> None:
    """Per-category totals."""
    breakdown = category_breakdown(open_store(settings).state.products)

    if not breakdown:
        click.echo("No products found.")
        return

    click.echo(f"{'Category':<16} {'Items':>6} {'Qty':>8} {'Value':>14} {'Share':>8}")
    click.echo("-" * 56)
    for name, totals in breakdown.items():
        click.echo(
            f"{name[:16]:<16} {totals.count:>6} {totals.total_quantity:>8} "
            f"{str(totals.total_value):>14} {str(totals.share_of_value) + '%':>8}"
        )


@click.command("top")
@click.option("--limit", default=None, type=int, help="How many products to show.")
@click.pass_obj
def report_top(settings: Settings, limit: int | None) -> None:
    """Products holding the most stock value."""
    limit = settings.top_n if limit is None else limit
    products = top_products_by_value(open_store(settings).state.products, limit)

    if not products:
        click.echo("No products found.")
        return

    for rank, p in enumerate(products, start=1):
        click.echo(f"{rank:>3}. {p.name:<24} {p.quantity:>6} x {str(p.price):>10} = {p.value}")


@click.command("alerts")
@click.option("--limit", default=None, type=int, help="Maximum items to list.")
@click.pass_obj
def report_alerts(settings: Settings, limit: int | None) -> None:
    """Out-of-stock and low-stock products."""
    limit = settings.alert_limit if limit is None else limit
    alerts = stock_alerts(open_store(settings).state.products, limit)

    if not alerts.items and not alerts.overflow:
        click.echo("All products are well stocked.")
        return

    if alerts.items:
        echo_product_table(alerts.items)
    if alerts.overflow:
        click.echo(f"+{alerts.overflow} more items need attention")


@click.command("activity")
@click.option("--limit", default=None, type=int, help="Ledger entries to scan.")
@click.pass_obj
def report_activity(settings: Settings, limit: int | None) -> None:
    """Latest stock movements."""
    limit = settings.recent_limit if limit is None else limit
    entries = recent_activity(open_store(settings).state, limit)

    if not entries:
        click.echo("No recent activity.")
        return

    for entry in entries:
        t = entry.transaction
        sign = "+" if t.type is TransactionType.STOCK_IN else "-"
        click.echo(
            f"{t.date:%Y-%m-%d %H:%M}  {sign}{t.quantity:<5} {entry.product.name:<24} {t.notes}"
        )


@click.command("movement")
@_range_option
@click.pass_obj
def report_movement(settings: Settings, date_range: str) -> None:
    """Stock in/out totals over a date range."""
    chosen = DateRange(date_range)
    summary = transaction_summary(
        open_store(settings).state.transactions, chosen.window, utc_now()
    )

    click.echo(f"{chosen.label}")
    click.echo(f"Stock in:      {summary.stock_in}")
    click.echo(f"Stock out:     {summary.stock_out}")
    click.echo(f"Net movement:  {summary.net_movement:+d}")


@click.command("export")
@_range_option
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="File to write (default: inventory-report-<date>.json).",
)
@click.pass_obj
def report_export(settings: Settings, date_range: str, output: str | None) -> None:
    """Write a report snapshot as JSON."""
    now = utc_now()
    report = build_report(open_store(settings).state, DateRange(date_range), now, settings.top_n)
    target = Path(output) if output else Path(report_filename(now))
    target.write_text(export_report(report), encoding="utf-8")
    click.echo(f"Report written to {target}")
