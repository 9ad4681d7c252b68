"""Registry transport abstraction.

Fetching index documents and raw files is the only network activity borrowr
performs. Keeping it behind an ABC lets tests serve registries from memory.
"""

from abc import ABC, abstractmethod


class RegistryTransport(ABC):
    """Abstract HTTP(S) text retrieval for dependency injection."""

    @abstractmethod
    def get_text(self, url: str) -> str:
        """Fetch the body of url as text.

        Args:
            url: Absolute http(s) URL

        Returns:
            Response body decoded as text

        Raises:
            TransportError: If the request fails or returns a non-success status
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Release connections held by the transport."""
        ...
