"""Configuration schema for .borrowrrc files.

Validated with pydantic; unknown keys are rejected so typos surface as errors
instead of being silently ignored.
"""

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

CLI_NAME = "borrowr"
DEFAULT_CONFIG_FILE = f".{CLI_NAME}rc"

# Remote names become a directory under the blocks root and the part before
# ":" in a block spec.
REMOTE_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def is_valid_remote_name(name: str) -> bool:
    return REMOTE_NAME_PATTERN.match(name) is not None


class RepositoryConfig(BaseModel):
    """Default repository used by `borrowr add`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: Literal["raw-github"]
    url: str


class RemoteConfig(BaseModel):
    """A named remote registry used by `borrowr import`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Literal["github-raw"]
    url: str


class BorrowrConfig(BaseModel):
    """Top-level .borrowrrc document."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    schema_url: str | None = Field(default=None, alias="$schema")
    repository: RepositoryConfig | None = None
    remotes: dict[str, RemoteConfig] | None = None

    @field_validator("remotes")
    @classmethod
    def validate_remote_names(
        cls, v: dict[str, RemoteConfig] | None
    ) -> dict[str, RemoteConfig] | None:
        """Validate every remote name is usable as a single directory name."""
        for name in v or {}:
            if not is_valid_remote_name(name):
                raise ValueError(
                    f"invalid remote name {name!r}: use letters, digits, '.', '_' or '-'"
                )
        return v

    def with_repository(self, repository: RepositoryConfig) -> "BorrowrConfig":
        """Return new config with repository replaced (maintaining immutability)."""
        return self.model_copy(update={"repository": repository})

    def with_remote(self, name: str, remote: RemoteConfig) -> "BorrowrConfig":
        """Return new config with remote name added or replaced."""
        remotes = {**(self.remotes or {}), name: remote}
        return self.model_copy(update={"remotes": remotes})

    def to_document(self) -> dict[str, object]:
        """Serialize using on-disk key names, omitting unset sections."""
        return self.model_dump(by_alias=True, exclude_none=True)
