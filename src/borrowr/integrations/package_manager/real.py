"""Real package manager implementation using subprocess."""

import logging
import subprocess
from pathlib import Path

from borrowr.core.errors import InstallDependenciesError
from borrowr.integrations.package_manager.abc import (
    PackageManager,
    detect_package_manager,
    install_command,
)

logger = logging.getLogger(__name__)


class RealPackageManager(PackageManager):
    """Production implementation running npm/yarn/pnpm/bun synchronously."""

    def install(self, cwd: Path, packages: list[str]) -> None:
        cmd = install_command(detect_package_manager(cwd), packages)
        logger.debug("Running %s in %s", " ".join(cmd), cwd)

        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except FileNotFoundError as e:
            raise InstallDependenciesError(cmd, f"Command not found: {cmd[0]}") from e

        if result.returncode != 0:
            detail = f"Exit code: {result.returncode}"
            stderr_stripped = result.stderr.strip()
            if stderr_stripped:
                detail += f"\nstderr: {stderr_stripped}"
            raise InstallDependenciesError(cmd, detail)
