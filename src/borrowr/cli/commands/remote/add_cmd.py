from pathlib import Path
from urllib.parse import urlparse

import click

from borrowr.cli.commands.shared import cwd_option
from borrowr.cli.ensure import ensure_directory
from borrowr.cli.error_boundary import cli_error_boundary
from borrowr.cli.output import highlight, success
from borrowr.core.config import (
    DEFAULT_CONFIG_FILE,
    BorrowrConfig,
    RemoteConfig,
    is_valid_remote_name,
)
from borrowr.core.context import BorrowrContext
from borrowr.core.errors import ConfigurationInvalidError, NothingSelectedError


def default_remote_name(url: str) -> str | None:
    """Guess a remote name from its URL: the third path segment without scheme.

    Example:
        >>> default_remote_name("https://raw.githubusercontent.com/acme/blocks/main/index.json")
        'blocks'
    """
    segments = url.split("://", 1)[-1].split("/")
    if len(segments) < 3 or not segments[2]:
        return None
    return segments[2]


@click.command("add")
@click.argument("url")
@click.argument("name", required=False)
@click.option("-y", "--yes", is_flag=True, help="Create the configuration file without asking.")
@cwd_option
@click.pass_obj
@cli_error_boundary
def add_remote(
    ctx: BorrowrContext, url: str, name: str | None, yes: bool, cwd_option: Path | None
) -> None:
    """Add a remote repository.

    URL points at the remote's registry index document. NAME defaults to the
    repository name taken from URL.
    """
    cwd = ensure_directory(cwd_option or ctx.cwd)
    if urlparse(url).scheme not in ("http", "https"):
        raise ConfigurationInvalidError(f"Remote URL must use http or https: {url}")

    previous = ctx.config_store.load(cwd)

    remote_name = name
    if remote_name is None:
        remote_name = ctx.prompter.text(
            "What is the name of the remote repository?", default_remote_name(url)
        )
        if not remote_name:
            raise NothingSelectedError("No remote name given. Exiting.")

    if not is_valid_remote_name(remote_name):
        raise ConfigurationInvalidError(
            f"Invalid remote name {remote_name!r}. Use letters, digits, '.', '_' or '-'."
        )

    if previous is None and not yes:
        create = ctx.prompter.confirm(
            "No configuration found. Would you like to create one? "
            f"({highlight(DEFAULT_CONFIG_FILE)})",
            True,
        )
        if not create:
            return

    config = (previous or BorrowrConfig()).with_remote(
        remote_name, RemoteConfig(type="github-raw", url=url)
    )
    written = ctx.config_store.save(cwd, config)
    success(f"✓ Added remote {remote_name} to {written}")
