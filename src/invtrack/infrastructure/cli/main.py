import os

import click

from invtrack.domain.exceptions import DomainException
from invtrack.infrastructure.cli.data_commands import data_export, data_import, data_reset, data_stats
from invtrack.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from invtrack.infrastructure.cli.report_commands import (
    report_activity,
    report_alerts,
    report_categories,
    report_export,
    report_movement,
    report_overview,
    report_top,
)
from invtrack.infrastructure.cli.stock_commands import stock_in, stock_out
from invtrack.infrastructure.config import Settings
from invtrack.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding the saved inventory (overrides INVTRACK_DATA_DIR).",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: str | None, verbose: bool) -> None:
    """invtrack: inventory tracker."""
    configure_logging(verbose)
    env = dict(os.environ)
    if data_dir:
        env["INVTRACK_DATA_DIR"] = data_dir
    try:
        ctx.obj = Settings.from_env(env)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def stock() -> None:
    """Record stock movements."""


@cli.group()
def report() -> None:
    """Inventory analytics."""


@cli.group()
def data() -> None:
    """Backup, restore and reset."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
stock.add_command(stock_in)
stock.add_command(stock_out)
report.add_command(report_activity)
report.add_command(report_alerts)
report.add_command(report_categories)
report.add_command(report_export)
report.add_command(report_movement)
report.add_command(report_overview)
report.add_command(report_top)
data.add_command(data_export)
data.add_command(data_import)
data.add_command(data_reset)
data.add_command(data_stats)
