"""Fetch the raw file content for every entry of a resolved tree."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor

from borrowr.core.errors import RegistryFetchError, TransportError
from borrowr.integrations.transport.abc import RegistryTransport
from borrowr.registry.models import FetchedEntry, FetchedPayload, ResolvedTree

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


def join_url(base_url: str, path: str) -> str:
    """Join a base URL and a relative path with exactly one slash."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def fetch_tree(
    transport: RegistryTransport,
    base_url: str,
    tree: ResolvedTree,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> FetchedPayload:
    """Retrieve every file of every entry in tree.

    All files are requested concurrently. Each future owns one slot and
    results are gathered in submission order, so the content list of an entry
    lines up with its files list whatever order requests complete in.

    Args:
        transport: Transport used for the requests
        base_url: Base URL the entries' file paths are relative to
        tree: Resolved entries to fetch
        max_workers: Upper bound on concurrent requests

    Returns:
        Payload in the same entry order as tree

    Raises:
        RegistryFetchError: If any file cannot be retrieved. No partial
            payload is returned.
    """
    if not tree:
        return {}

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures: dict[str, list[Future[str]]] = {
            entry_id: [
                executor.submit(transport.get_text, join_url(base_url, path))
                for path in entry.files
            ]
            for entry_id, entry in tree.items()
        }

        payload: FetchedPayload = {}
        for entry_id, entry in tree.items():
            try:
                raw_files = tuple(future.result() for future in futures[entry_id])
            except TransportError as e:
                for pending in (f for fs in futures.values() for f in fs):
                    pending.cancel()
                raise RegistryFetchError(base_url, str(e)) from e

            logger.debug("Fetched %d file(s) for %s", len(raw_files), entry_id)
            payload[entry_id] = FetchedEntry(entry=entry, raw_files=raw_files)

    return payload
