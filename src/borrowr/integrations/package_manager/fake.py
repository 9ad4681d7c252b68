"""Fake package manager implementation for testing."""

from pathlib import Path

from borrowr.core.errors import InstallDependenciesError
from borrowr.integrations.package_manager.abc import (
    PackageManager,
    detect_package_manager,
    install_command,
)


class FakePackageManager(PackageManager):
    """In-memory fake that records install commands without running them.

    This class has NO public setup methods. All state is provided via
    constructor or captured during execution.
    """

    def __init__(self, *, fail: bool = False) -> None:
        """Create FakePackageManager.

        Args:
            fail: If True, every install raises InstallDependenciesError
        """
        self._fail = fail
        self._install_calls: list[tuple[Path, list[str]]] = []
        self._commands: list[list[str]] = []

    @property
    def install_calls(self) -> list[tuple[Path, list[str]]]:
        """(cwd, packages) for every install() call.

        This property is for test assertions only.
        """
        return self._install_calls

    @property
    def commands(self) -> list[list[str]]:
        """Command lines that would have been executed.

        This property is for test assertions only.
        """
        return self._commands

    def install(self, cwd: Path, packages: list[str]) -> None:
        cmd = install_command(detect_package_manager(cwd), packages)
        self._install_calls.append((cwd, list(packages)))
        self._commands.append(cmd)
        if self._fail:
            raise InstallDependenciesError(cmd, "simulated failure")
