"""Load registry index documents and resolve repository base URLs."""

import json
import logging
from urllib.parse import urlparse

from pydantic import ValidationError

from borrowr.core.errors import (
    ConfigurationInvalidError,
    RegistryFetchError,
    TransportError,
)
from borrowr.integrations.transport.abc import RegistryTransport
from borrowr.registry.fetcher import join_url
from borrowr.registry.models import RegistryIndex, TopLevelIndex

logger = logging.getLogger(__name__)

RAW_GITHUB_HOST = "raw.githubusercontent.com"
GITHUB_HOSTS = ("github.com", "www.github.com")
DEFAULT_BRANCH = "main"
TOP_LEVEL_INDEX_FILE = ".borrowmeta"


def raw_github_base_url(url: str, branch: str = DEFAULT_BRANCH) -> str:
    """Rewrite a GitHub web URL into its raw-content base URL.

    Examples:
        >>> raw_github_base_url("https://github.com/acme/blocks")
        'https://raw.githubusercontent.com/acme/blocks/main'
        >>> raw_github_base_url("git+https://github.com/acme/blocks.git")
        'https://raw.githubusercontent.com/acme/blocks/main'
        >>> raw_github_base_url("https://github.com/acme/blocks/tree/dev")
        'https://raw.githubusercontent.com/acme/blocks/dev'

    URLs already pointing at raw.githubusercontent.com are returned without a
    trailing slash.

    Raises:
        ConfigurationInvalidError: If url is not a GitHub repository URL
    """
    normalized = url.strip()
    if normalized.startswith("git+"):
        normalized = normalized[len("git+") :]

    parsed = urlparse(normalized)
    if parsed.netloc == RAW_GITHUB_HOST:
        return normalized.rstrip("/")

    if parsed.scheme not in ("http", "https") or parsed.netloc not in GITHUB_HOSTS:
        raise ConfigurationInvalidError(f"Not a GitHub repository URL: {url}")

    segments = [segment for segment in parsed.path.split("/") if segment]
    if len(segments) < 2:
        raise ConfigurationInvalidError(f"GitHub URL is missing owner or repository: {url}")

    owner = segments[0]
    repo = segments[1].removesuffix(".git")
    if len(segments) >= 4 and segments[2] == "tree":
        branch = segments[3]

    return f"https://{RAW_GITHUB_HOST}/{owner}/{repo}/{branch}"


def _fetch_document(transport: RegistryTransport, url: str) -> object:
    try:
        text = transport.get_text(url)
    except TransportError as e:
        raise RegistryFetchError(url, str(e)) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise RegistryFetchError(url, f"Index is not valid JSON: {e}") from e


def load_registry_index(transport: RegistryTransport, url: str) -> RegistryIndex:
    """Fetch and validate a remote's index document.

    Raises:
        RegistryFetchError: If the document cannot be fetched or is invalid
    """
    logger.debug("Loading registry index from %s", url)
    data = _fetch_document(transport, url)
    try:
        return RegistryIndex.model_validate(data)
    except ValidationError as e:
        raise RegistryFetchError(url, f"Invalid registry index: {e}") from e


def load_top_level_index(transport: RegistryTransport, base_url: str) -> TopLevelIndex:
    """Fetch and validate the .borrowmeta index at the root of a repository.

    Raises:
        RegistryFetchError: If the document cannot be fetched or is invalid
    """
    url = join_url(base_url, TOP_LEVEL_INDEX_FILE)
    logger.debug("Loading top-level index from %s", url)
    data = _fetch_document(transport, url)
    try:
        return TopLevelIndex.model_validate(data)
    except ValidationError as e:
        raise RegistryFetchError(url, f"Invalid registry index: {e}") from e
