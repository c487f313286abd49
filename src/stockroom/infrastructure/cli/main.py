from pathlib import Path

import click

from stockroom.infrastructure.bootstrap import DEFAULT_DATA_FILE, inventory_store
from stockroom.infrastructure.cli.form_commands import form
from stockroom.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
)
from stockroom.infrastructure.logging import setup_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.group(invoke_without_command=True)
@click.option(
    "--file",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_DATA_FILE,
    show_default=True,
    envvar="STOCKROOM_FILE",
    help="Inventory file to load and rewrite.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="STOCKROOM_LOG_LEVEL",
    help="Minimum level of log messages written to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, file_path: Path, log_level: str) -> None:
    """Stockroom: terminal inventory tracker.

    Run without a command to open the interactive form.
    """
    setup_logging(log_level)
    # One store per process; every command works through it.
    ctx.obj = inventory_store(file_path)

    if ctx.invoked_subcommand is None:
        ctx.invoke(form)


# Register subcommands
cli.add_command(form)
cli.add_command(product_add)
cli.add_command(product_delete)
cli.add_command(product_list)
