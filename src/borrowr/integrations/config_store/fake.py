"""Fake configuration store for testing."""

from pathlib import Path

from borrowr.core.config import DEFAULT_CONFIG_FILE, BorrowrConfig
from borrowr.integrations.config_store.abc import ConfigStore


class FakeConfigStore(ConfigStore):
    """In-memory fake implementation - no filesystem access.

    A single configuration is shared by every cwd.
    """

    def __init__(self, *, config: BorrowrConfig | None = None) -> None:
        self._config = config
        self._saved: list[tuple[Path, BorrowrConfig]] = []

    @property
    def saved(self) -> list[tuple[Path, BorrowrConfig]]:
        """(cwd, config) for every save() call.

        This property is for test assertions only.
        """
        return self._saved

    def load(self, cwd: Path) -> BorrowrConfig | None:
        return self._config

    def save(self, cwd: Path, config: BorrowrConfig) -> Path:
        self._config = config
        self._saved.append((cwd, config))
        return cwd / DEFAULT_CONFIG_FILE
