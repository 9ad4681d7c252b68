"""Package manager abstraction for installing declared package dependencies."""

from abc import ABC, abstractmethod
from pathlib import Path

# Checked in order; the first lockfile present decides the package manager.
LOCKFILES: tuple[tuple[str, str], ...] = (
    ("bun.lockb", "bun"),
    ("bun.lock", "bun"),
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
)
DEFAULT_PACKAGE_MANAGER = "npm"


def detect_package_manager(cwd: Path) -> str:
    """Pick the package manager whose lockfile is present in cwd.

    Falls back to npm when no known lockfile exists.
    """
    for lockfile, manager in LOCKFILES:
        if (cwd / lockfile).exists():
            return manager
    return DEFAULT_PACKAGE_MANAGER


def install_command(manager: str, packages: list[str]) -> list[str]:
    """Build the install command line for manager.

    npm uses `install`; every other supported manager uses `add`.
    """
    subcommand = "install" if manager == "npm" else "add"
    return [manager, subcommand, *packages]


class PackageManager(ABC):
    """Abstract package manager operations for dependency injection."""

    @abstractmethod
    def install(self, cwd: Path, packages: list[str]) -> None:
        """Install packages into the project at cwd.

        Args:
            cwd: Project directory (also used for lockfile detection)
            packages: Package names to install

        Raises:
            InstallDependenciesError: If the package manager fails
        """
        ...
