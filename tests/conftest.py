"""Shared registry fixtures."""

import json

import pytest

from borrowr.core.config import BorrowrConfig, RemoteConfig, RepositoryConfig
from tests.test_utils.registry import (
    BUTTON_SOURCE,
    RAW_BASE,
    REMOTE_INDEX_URL,
    REPOSITORY_URL,
    UTILS_SOURCE,
)


@pytest.fixture
def top_level_documents() -> dict[str, str]:
    """Documents served for the default repository (used by `add`)."""
    index = {
        "version": "1.0.0",
        "registry": {
            "button": {
                "files": ["cli/components/button.tsx"],
                "dependencies": ["left-pad"],
                "registryDependencies": ["utils"],
            },
            "utils": {"files": ["cli/lib/utils.ts"]},
        },
    }
    return {
        f"{RAW_BASE}/.borrowmeta": json.dumps(index),
        f"{RAW_BASE}/cli/components/button.tsx": BUTTON_SOURCE,
        f"{RAW_BASE}/cli/lib/utils.ts": UTILS_SOURCE,
    }


@pytest.fixture
def remote_documents() -> dict[str, str]:
    """Documents served for the "acme" remote (used by `import`)."""
    index = {
        "version": "2.1.0",
        "baseUrl": RAW_BASE,
        "basePath": "registry/",
        "registry": {
            "button": {
                "files": ["registry/button/button.tsx"],
                "registryDependencies": ["utils"],
            },
            "utils": {"files": ["registry/utils/utils.ts"]},
        },
    }
    return {
        REMOTE_INDEX_URL: json.dumps(index),
        f"{RAW_BASE}/registry/button/button.tsx": BUTTON_SOURCE,
        f"{RAW_BASE}/registry/utils/utils.ts": UTILS_SOURCE,
    }


@pytest.fixture
def repository_config() -> BorrowrConfig:
    return BorrowrConfig(repository=RepositoryConfig(mode="raw-github", url=REPOSITORY_URL))


@pytest.fixture
def remote_config() -> BorrowrConfig:
    return BorrowrConfig(remotes={"acme": RemoteConfig(type="github-raw", url=REMOTE_INDEX_URL)})
