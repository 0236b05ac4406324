"""Shared HTTP client with configurable timeout."""

from typing import Any, Optional

import httpx


class HttpClient:
    """Thin wrapper around httpx.Client with a configurable timeout.

    One instance per external service keeps timeouts independently configurable.
    Redirects are followed so a moved endpoint still yields the final body.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._client = httpx.Client(
            timeout=timeout, follow_redirects=True, transport=transport
        )

    def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return self._client.get(url, **kwargs)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
