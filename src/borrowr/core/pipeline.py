"""Resolve, fetch and install one registry's selection.

This is the shared path behind `borrowr add` (default repository) and
`borrowr import` (one call per remote).
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from borrowr.core.dependencies import install_package_dependencies
from borrowr.core.installer import InstallOptions, InstallReport, install_payload
from borrowr.integrations.package_manager.abc import PackageManager
from borrowr.integrations.transport.abc import RegistryTransport
from borrowr.registry.fetcher import fetch_tree
from borrowr.registry.models import ResolvedTree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BorrowResult:
    """What a single registry installation did."""

    tree: ResolvedTree
    report: InstallReport
    package_installs: list[list[str]]


def borrow_components(
    *,
    transport: RegistryTransport,
    package_manager: PackageManager,
    tree: ResolvedTree,
    base_url: str,
    options: InstallOptions,
    project_dir: Path,
) -> BorrowResult:
    """Fetch every file of tree, write it, then install declared packages.

    Nothing is written until every file of the tree has been retrieved.

    Args:
        transport: Transport for raw file requests
        package_manager: Package manager for declared dependencies
        tree: Resolved entries to install
        base_url: Base URL the entries' files are relative to
        options: Destination and conflict handling
        project_dir: Directory the package manager runs in

    Raises:
        RegistryFetchError: If any file cannot be retrieved
        InstallError: If writing fails
        InstallDependenciesError: If the package manager fails
    """
    payload = fetch_tree(transport, base_url, tree)
    report = install_payload(payload, options)
    package_installs = install_package_dependencies(
        package_manager, project_dir, payload, report.processed_ids
    )
    logger.debug(
        "Installed %d entries: %d written, %d skipped, %d package install(s)",
        len(report.processed_ids),
        len(report.written),
        len(report.skipped),
        len(package_installs),
    )
    return BorrowResult(tree=tree, report=report, package_installs=package_installs)


def describe_plan(tree: ResolvedTree, selected_ids: list[str]) -> list[str]:
    """Render one line per resolved id, marking entries pulled in as dependencies."""
    lines = []
    for entry_id, entry in tree.items():
        suffix = "" if entry_id in selected_ids else " (dependency)"
        lines.append(f"{entry_id}{suffix} - {len(entry.files)} file(s)")
    return lines
