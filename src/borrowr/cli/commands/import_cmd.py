"""Import command: install blocks from one or more named remotes."""

from pathlib import Path

import click

from borrowr.cli.commands.shared import confirm_plan, cwd_option, overwrite_confirmer
from borrowr.cli.ensure import ensure_config, ensure_directory, ensure_remotes
from borrowr.cli.error_boundary import cli_error_boundary
from borrowr.cli.output import success, user_output, warn
from borrowr.core.block_spec import BlockSpec, parse_block_spec
from borrowr.core.context import BorrowrContext
from borrowr.core.errors import ConfigurationInvalidError, NothingSelectedError
from borrowr.core.installer import InstallOptions
from borrowr.core.pipeline import borrow_components
from borrowr.registry.loader import load_registry_index
from borrowr.registry.models import RegistryIndex
from borrowr.registry.resolver import resolve_tree

DEFAULT_BLOCKS_DIR = Path("src") / "blocks"


def _select_blocks(
    ctx: BorrowrContext, spec: BlockSpec, index: RegistryIndex, select_all: bool
) -> list[str]:
    if spec.block_id is not None:
        return [spec.block_id]
    if select_all:
        return list(index.registry)
    return ctx.prompter.multiselect(
        f"Which blocks would you like to add from {spec.remote_id}?",
        list(index.registry),
        [],
    )


@click.command("import")
@click.argument("block_specs", nargs=-1, required=True, metavar="BLOCK_SPEC...")
@click.option("-y", "--yes", is_flag=True, help="Skip confirmation prompt.")
@click.option("-o", "--overwrite", is_flag=True, help="Overwrite existing files.")
@click.option(
    "-a", "--all", "select_all", is_flag=True, help="Add all available blocks from the remote."
)
@cwd_option
@click.option(
    "-p",
    "--path",
    "target_path",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="The path to add the block(s) to. Defaults to src/blocks.",
)
@click.pass_obj
@cli_error_boundary
def import_cmd(
    ctx: BorrowrContext,
    block_specs: tuple[str, ...],
    yes: bool,
    overwrite: bool,
    select_all: bool,
    cwd_option: Path | None,
    target_path: Path | None,
) -> None:
    """Import blocks from remote repositories.

    BLOCK_SPEC is REMOTE or REMOTE:BLOCK. A bare REMOTE selects interactively
    (or everything with --all). Blocks are written to <path>/<remote>/ so
    remotes never overwrite each other.

    Examples:

        borrowr import acme:button acme:dialog

        borrowr import acme --all
    """
    cwd = ensure_directory(cwd_option or ctx.cwd)
    config = ensure_config(ctx.config_store.load(cwd), "remote add")
    remotes = ensure_remotes(config)

    # Validate every spec before touching the network
    specs = [parse_block_spec(raw) for raw in block_specs]
    for spec in specs:
        if spec.remote_id not in remotes:
            raise ConfigurationInvalidError(f"Remote {spec.remote_id} not found.")

    indexes: dict[str, RegistryIndex] = {}
    selected_by_remote: dict[str, list[str]] = {}
    for spec in specs:
        if spec.remote_id not in indexes:
            indexes[spec.remote_id] = load_registry_index(
                ctx.transport, remotes[spec.remote_id].url
            )
        chosen = _select_blocks(ctx, spec, indexes[spec.remote_id], select_all)
        selected = selected_by_remote.setdefault(spec.remote_id, [])
        selected.extend(block_id for block_id in chosen if block_id not in selected)

    if not any(selected_by_remote.values()):
        raise NothingSelectedError("No blocks selected. Exiting.")

    if not yes:
        qualified = [
            BlockSpec(remote_id, block_id).qualified_id
            for remote_id, block_ids in selected_by_remote.items()
            for block_id in block_ids
        ]
        proceed = confirm_plan(
            ctx.prompter,
            "Selected blocks:",
            qualified,
            "Ready to import blocks and dependencies. Proceed?",
        )
        if not proceed:
            return

    blocks_root = cwd / (target_path if target_path is not None else DEFAULT_BLOCKS_DIR)
    confirm_overwrite = overwrite_confirmer(ctx.prompter)
    written = 0
    skipped = 0

    for remote_id, selected in selected_by_remote.items():
        index = indexes[remote_id]
        tree = resolve_tree(index, selected)
        if not tree:
            warn(f"Selected blocks not found in {remote_id}. Skipping.")
            continue

        user_output(f"Importing blocks from {remote_id}...")
        result = borrow_components(
            transport=ctx.transport,
            package_manager=ctx.package_manager,
            tree=tree,
            base_url=index.base_url,
            options=InstallOptions(
                target_root=blocks_root,
                overwrite=overwrite,
                path_prefix_to_strip=index.base_path,
                extra_prefix_segments=(remote_id,),
                selected_ids=frozenset(selected),
                confirm_overwrite=confirm_overwrite,
            ),
            project_dir=cwd,
        )
        written += len(result.report.written)
        skipped += len(result.report.skipped)

    success(f"✓ Done. {written} file(s) written, {skipped} skipped.")
