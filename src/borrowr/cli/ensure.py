"""CLI precondition helpers.

Each helper raises a borrowr error instead of printing, so the error boundary
stays the single place that formats failures.
"""

from pathlib import Path

from borrowr.cli.output import highlight
from borrowr.core.config import BorrowrConfig, RemoteConfig, RepositoryConfig
from borrowr.core.errors import ConfigurationMissingError


def ensure_directory(path: Path) -> Path:
    """Return path resolved, requiring that it is an existing directory."""
    resolved = path.resolve()
    if not resolved.is_dir():
        raise ConfigurationMissingError(f"The path {resolved} does not exist. Please try again.")
    return resolved


def ensure_config(config: BorrowrConfig | None, setup_command: str) -> BorrowrConfig:
    if config is None:
        raise ConfigurationMissingError(
            f"Configuration is missing. Please run {highlight(setup_command)} "
            "to create a configuration file."
        )
    return config


def ensure_repository(config: BorrowrConfig) -> RepositoryConfig:
    if config.repository is None:
        raise ConfigurationMissingError(
            f"No repository configured. Please run {highlight('init')} to set one."
        )
    return config.repository


def ensure_remotes(config: BorrowrConfig) -> dict[str, RemoteConfig]:
    if not config.remotes:
        raise ConfigurationMissingError(
            f"No remote repositories found. Please run {highlight('remote add')} to add one."
        )
    return config.remotes
