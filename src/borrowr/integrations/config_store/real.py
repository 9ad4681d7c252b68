"""Configuration store backed by .borrowrrc files on disk."""

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from borrowr.core.config import CLI_NAME, DEFAULT_CONFIG_FILE, BorrowrConfig
from borrowr.core.errors import ConfigurationInvalidError, ConfigurationMissingError
from borrowr.integrations.config_store.abc import ConfigStore

logger = logging.getLogger(__name__)

SEARCH_FILES = (
    "package.json",
    DEFAULT_CONFIG_FILE,
    f"{DEFAULT_CONFIG_FILE}.json",
    f"{DEFAULT_CONFIG_FILE}.yaml",
    f"{DEFAULT_CONFIG_FILE}.yml",
)


def _parse(path: Path, text: str) -> object:
    # JSON documents may use tabs, which YAML rejects
    if path.suffix == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def _read_candidate(path: Path) -> object | None:
    """Return the raw config found in path, or None if it holds none.

    package.json only counts when it has a "borrowr" key.
    """
    try:
        data = _parse(path, path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationInvalidError(f"Invalid configuration found in {path}: {e}") from e

    if path.name == "package.json":
        if not isinstance(data, dict) or CLI_NAME not in data:
            return None
        return data[CLI_NAME]
    if data is None:
        return {}
    return data


def find_config_file(cwd: Path) -> tuple[Path, object] | None:
    """Search cwd and its parents for the first configuration source."""
    for directory in (cwd, *cwd.parents):
        for name in SEARCH_FILES:
            candidate = directory / name
            if not candidate.is_file():
                continue
            data = _read_candidate(candidate)
            if data is not None:
                return candidate, data
    return None


class RealConfigStore(ConfigStore):
    """Production implementation reading and writing .borrowrrc files."""

    def load(self, cwd: Path) -> BorrowrConfig | None:
        found = find_config_file(cwd.resolve())
        if found is None:
            return None

        path, data = found
        logger.debug("Loading configuration from %s", path)
        try:
            return BorrowrConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationInvalidError(f"Invalid configuration found in {path}\n{e}") from e

    def save(self, cwd: Path, config: BorrowrConfig) -> Path:
        if not cwd.is_dir():
            raise ConfigurationMissingError(f"The path {cwd} does not exist. Please try again.")

        target = cwd / DEFAULT_CONFIG_FILE
        target.write_text(json.dumps(config.to_document(), indent=2), encoding="utf-8")
        return target
