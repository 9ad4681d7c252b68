"""Configuration store abstraction."""

from abc import ABC, abstractmethod
from pathlib import Path

from borrowr.core.config import BorrowrConfig


class ConfigStore(ABC):
    """Abstract interface for reading and writing borrowr configuration.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def load(self, cwd: Path) -> BorrowrConfig | None:
        """Find and load the configuration that applies to cwd.

        Returns:
            Parsed configuration, or None if none was found

        Raises:
            ConfigurationInvalidError: If a configuration file exists but is invalid
        """
        ...

    @abstractmethod
    def save(self, cwd: Path, config: BorrowrConfig) -> Path:
        """Write config to the default configuration file in cwd.

        Returns:
            Path of the written file

        Raises:
            ConfigurationMissingError: If cwd does not exist
        """
        ...
