"""Pydantic models for registry index documents.

Index documents are validated strictly at the boundary: unknown fields are
rejected, the version must be a SemVer string, and every entry needs at least
one file. Validated models are frozen.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, field_validator

SEMVER_PATTERN = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)


class RegistryEntry(BaseModel):
    """A single component: its files and what it depends on."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    files: tuple[str, ...] = Field(..., min_length=1)
    dependencies: tuple[str, ...] = ()
    registry_dependencies: tuple[str, ...] = Field(default=(), alias="registryDependencies")


class _IndexBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    version: str
    registry: dict[str, RegistryEntry]

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Validate version is a semantic version string."""
        if SEMVER_PATTERN.match(v) is None:
            raise ValueError(f"version must be a semantic version, got {v!r}")
        return v


class TopLevelIndex(_IndexBase):
    """Index served from a repository's .borrowmeta file.

    Files are resolved relative to the repository base, so there is no
    baseUrl/basePath here.
    """


class RegistryIndex(_IndexBase):
    """Index of a named remote, carrying where its files live."""

    base_url: str = Field(..., alias="baseUrl")
    base_path: str = Field(..., alias="basePath")


class HasRegistry(Protocol):
    @property
    def registry(self) -> Mapping[str, RegistryEntry]: ...


# Deduplicated closure of requested ids, in first-discovery order.
ResolvedTree = dict[str, RegistryEntry]


@dataclass(frozen=True)
class FetchedEntry:
    """A registry entry together with the raw content of its files.

    raw_files[i] is the content of entry.files[i].
    """

    entry: RegistryEntry
    raw_files: tuple[str, ...]

    @property
    def files(self) -> tuple[str, ...]:
        return self.entry.files

    @property
    def dependencies(self) -> tuple[str, ...]:
        return self.entry.dependencies


FetchedPayload = dict[str, FetchedEntry]
