"""Install the package dependencies declared by installed registry entries."""

from collections.abc import Iterable
from pathlib import Path

from borrowr.integrations.package_manager.abc import PackageManager
from borrowr.registry.models import FetchedPayload


def install_package_dependencies(
    package_manager: PackageManager,
    cwd: Path,
    payload: FetchedPayload,
    processed_ids: Iterable[str],
) -> list[list[str]]:
    """Issue one install request per processed entry that declares packages.

    Packages are not deduplicated across entries; the package manager's own
    install is idempotent.

    Returns:
        The package lists passed to the package manager, in call order
    """
    requested: list[list[str]] = []
    for entry_id in processed_ids:
        packages = list(payload[entry_id].dependencies)
        if not packages:
            continue
        package_manager.install(cwd, packages)
        requested.append(packages)
    return requested
