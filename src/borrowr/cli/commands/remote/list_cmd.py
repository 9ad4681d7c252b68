from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from borrowr.cli.commands.shared import cwd_option
from borrowr.cli.ensure import ensure_directory
from borrowr.cli.error_boundary import cli_error_boundary
from borrowr.cli.output import user_output
from borrowr.core.context import BorrowrContext


@click.command("list")
@cwd_option
@click.pass_obj
@cli_error_boundary
def list_remotes(ctx: BorrowrContext, cwd_option: Path | None) -> None:
    """List configured remote repositories."""
    cwd = ensure_directory(cwd_option or ctx.cwd)
    config = ctx.config_store.load(cwd)
    if config is None or not config.remotes:
        user_output("No remote repositories configured.")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("name", style="cyan", no_wrap=True)
    table.add_column("type", no_wrap=True)
    table.add_column("url")
    for remote_name, remote in sorted(config.remotes.items()):
        table.add_row(remote_name, remote.type, remote.url)

    Console().print(table)
