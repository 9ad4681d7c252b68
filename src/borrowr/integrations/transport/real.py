"""Real transport implementation using httpx."""

import httpx

from borrowr.core.errors import TransportError
from borrowr.integrations.transport.abc import RegistryTransport

DEFAULT_TIMEOUT_SECONDS = 30.0


class RealRegistryTransport(RegistryTransport):
    """Production implementation backed by a shared httpx client.

    httpx.Client is thread-safe, so one instance serves the concurrent file
    fetches of a whole run.
    """

    def __init__(
        self, timeout: float = DEFAULT_TIMEOUT_SECONDS, client: httpx.Client | None = None
    ) -> None:
        if client is None:
            client = httpx.Client(timeout=timeout, follow_redirects=True)
        self._client = client

    def get_text(self, url: str) -> str:
        try:
            response = self._client.get(url)
        except httpx.HTTPError as e:
            raise TransportError(url, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise TransportError(url, f"HTTP {response.status_code}")
        return response.text

    def close(self) -> None:
        self._client.close()
