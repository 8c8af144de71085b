from __future__ import annotations

import click

from catview.infrastructure.cli.catalog_commands import (
    catalog_browse,
    catalog_export,
    catalog_shell,
)
from catview.infrastructure.logger import setup_logging


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override LOG_LEVEL.",
)
def cli(log_level: str | None) -> None:
    """catview: search, sort and page through a product catalog"""
    setup_logging(log_level)


# Register subcommands
cli.add_command(catalog_browse)
cli.add_command(catalog_shell)
cli.add_command(catalog_export)
