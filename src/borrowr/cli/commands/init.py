"""Init command: point borrowr at a default component repository."""

from pathlib import Path

import click

from borrowr.cli.commands.shared import cwd_option
from borrowr.cli.ensure import ensure_directory
from borrowr.cli.error_boundary import cli_error_boundary
from borrowr.cli.output import highlight, success
from borrowr.core.config import DEFAULT_CONFIG_FILE, BorrowrConfig, RepositoryConfig
from borrowr.core.context import BorrowrContext
from borrowr.core.errors import ConfigurationInvalidError, ConfigurationMissingError
from borrowr.core.project import read_package_repository
from borrowr.registry.loader import raw_github_base_url


@click.command("init")
@click.option("-y", "--yes", is_flag=True, help="Skip confirmation prompt.")
@click.option(
    "-d", "--defaults", is_flag=True, help="Use the repository declared in package.json."
)
@cwd_option
@click.pass_obj
@cli_error_boundary
def init_cmd(ctx: BorrowrContext, yes: bool, defaults: bool, cwd_option: Path | None) -> None:
    """Initialize your project's borrowr configuration.

    Writes the default repository used by `borrowr add` to .borrowrrc,
    keeping any remotes already configured.
    """
    cwd = ensure_directory(cwd_option or ctx.cwd)
    package_repository = read_package_repository(cwd)

    if defaults:
        if package_repository is None:
            raise ConfigurationMissingError(
                "No repository found in package.json. Run init without --defaults."
            )
        repository_url = package_repository
    else:
        repository_url = ctx.prompter.text(
            f"What's the link for your {highlight('repository')}?", package_repository
        )

    if not repository_url:
        raise ConfigurationInvalidError("A repository URL is required.")

    # Fail now rather than on the first `add`
    raw_github_base_url(repository_url)

    existing = ctx.config_store.load(cwd) or BorrowrConfig()
    config = existing.with_repository(RepositoryConfig(mode="raw-github", url=repository_url))

    if not yes:
        proceed = ctx.prompter.confirm(
            f"Write configuration to {highlight(DEFAULT_CONFIG_FILE)}. Proceed?", True
        )
        if not proceed:
            return

    written = ctx.config_store.save(cwd, config)
    success(f"✓ Wrote {written}")
