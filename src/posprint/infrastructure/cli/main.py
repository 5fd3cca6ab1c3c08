from __future__ import annotations

import logging
from pathlib import Path

import click

from posprint.infrastructure.cli.document_commands import (
    drawer_open,
    print_receipt,
    print_request,
)


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to posprint.json.",
)
@click.option("--verbose", is_flag=True, default=False, help="Log debug output.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """posprint: thermal receipt printing"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"config_path": config_path}


# Register subcommands
cli.add_command(print_receipt)
cli.add_command(print_request)
cli.add_command(drawer_open)
