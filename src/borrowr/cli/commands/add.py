"""Add command: install components from the default repository."""

from pathlib import Path

import click

from borrowr.cli.commands.shared import confirm_plan, cwd_option, overwrite_confirmer
from borrowr.cli.ensure import ensure_config, ensure_directory, ensure_repository
from borrowr.cli.error_boundary import cli_error_boundary
from borrowr.cli.output import success, user_output
from borrowr.core.context import BorrowrContext
from borrowr.core.errors import NothingSelectedError
from borrowr.core.installer import InstallOptions
from borrowr.core.pipeline import borrow_components, describe_plan
from borrowr.registry.loader import load_top_level_index, raw_github_base_url
from borrowr.registry.resolver import resolve_tree

# Registry files live under cli/ in the repository; that segment is not mirrored locally.
REPOSITORY_PREFIX_TO_STRIP = "cli/"


@click.command("add")
@click.argument("ids", nargs=-1)
@click.option("-y", "--yes", is_flag=True, help="Skip confirmation prompt.")
@click.option("-o", "--overwrite", is_flag=True, help="Overwrite existing files.")
@cwd_option
@click.option("-a", "--all", "select_all", is_flag=True, help="Add all available components.")
@click.option(
    "-p",
    "--path",
    "target_path",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="The path to add the component(s) to, relative to the working directory.",
)
@click.pass_obj
@cli_error_boundary
def add_cmd(
    ctx: BorrowrContext,
    ids: tuple[str, ...],
    yes: bool,
    overwrite: bool,
    cwd_option: Path | None,
    select_all: bool,
    target_path: Path | None,
) -> None:
    """Add components from the configured repository.

    Components are resolved together with their registry dependencies.
    Without IDS or --all, an interactive selection is shown.

    Examples:

        borrowr add button dialog

        borrowr add --all --overwrite
    """
    cwd = ensure_directory(cwd_option or ctx.cwd)
    config = ensure_config(ctx.config_store.load(cwd), "init")
    repository = ensure_repository(config)

    base_url = raw_github_base_url(repository.url)
    index = load_top_level_index(ctx.transport, base_url)
    available = list(index.registry)

    if select_all:
        selected = available
    elif ids:
        selected = list(dict.fromkeys(ids))
    else:
        selected = ctx.prompter.multiselect(
            "Which components would you like to add?", available, []
        )

    if not selected:
        raise NothingSelectedError("No components selected. Exiting.")

    tree = resolve_tree(index, selected)
    if not tree:
        raise NothingSelectedError("Selected components not found. Exiting.")

    if not yes:
        proceed = confirm_plan(
            ctx.prompter,
            "Components to install:",
            describe_plan(tree, selected),
            "Ready to install components and dependencies. Proceed?",
        )
        if not proceed:
            return

    target_root = cwd / target_path if target_path is not None else cwd
    user_output("Installing components...")
    result = borrow_components(
        transport=ctx.transport,
        package_manager=ctx.package_manager,
        tree=tree,
        base_url=base_url,
        options=InstallOptions(
            target_root=target_root,
            overwrite=overwrite,
            path_prefix_to_strip=REPOSITORY_PREFIX_TO_STRIP,
            selected_ids=frozenset(selected),
            confirm_overwrite=overwrite_confirmer(ctx.prompter),
        ),
        project_dir=cwd,
    )

    success(
        f"✓ Done. {len(result.report.written)} file(s) written, "
        f"{len(result.report.skipped)} skipped."
    )
