"""Fake transport implementation for testing.

FakeRegistryTransport serves pre-configured documents from memory and records
every requested URL.
"""

import threading

from borrowr.core.errors import TransportError
from borrowr.integrations.transport.abc import RegistryTransport


class FakeRegistryTransport(RegistryTransport):
    """In-memory fake implementation.

    All state is provided via constructor. Any URL not in documents, or listed
    in failing_urls, raises TransportError.
    """

    def __init__(
        self,
        *,
        documents: dict[str, str] | None = None,
        failing_urls: set[str] | None = None,
    ) -> None:
        """Create FakeRegistryTransport with pre-configured responses.

        Args:
            documents: Mapping of absolute URL -> response body
            failing_urls: URLs that fail even if present in documents
        """
        self._documents = documents or {}
        self._failing_urls = failing_urls or set()
        self._requested_urls: list[str] = []
        self._closed = False
        self._lock = threading.Lock()

    @property
    def requested_urls(self) -> list[str]:
        """URLs requested so far, in call order.

        This property is for test assertions only.
        """
        return self._requested_urls

    @property
    def closed(self) -> bool:
        """Whether close() was called.

        This property is for test assertions only.
        """
        return self._closed

    def get_text(self, url: str) -> str:
        with self._lock:
            self._requested_urls.append(url)

        if url in self._failing_urls:
            raise TransportError(url, "simulated failure")
        if url not in self._documents:
            raise TransportError(url, "HTTP 404")
        return self._documents[url]

    def close(self) -> None:
        self._closed = True
