"""Remote repository management commands."""

import click

from borrowr.cli.commands.remote.add_cmd import add_remote
from borrowr.cli.commands.remote.list_cmd import list_remotes


@click.group("remote")
def remote_group() -> None:
    """Manage remote repositories."""
    pass


remote_group.add_command(add_remote)
remote_group.add_command(list_remotes)
