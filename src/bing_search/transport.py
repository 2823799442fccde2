"""
HTTP transport for the Bing Search client.

The client only needs ``perform_get``; anything providing that method (a
fake in tests, a proxying transport) can stand in for ``HttpxTransport``.
"""

import logging
from typing import Optional, Protocol, Tuple

import httpx

from bing_search.errors import TransportError
from bing_search.utils.config import DEFAULT_HOST, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class Transport(Protocol):
    def perform_get(
        self, path: str, query_string: str, username: str, password: str
    ) -> Tuple[int, bytes]:
        ...


class HttpxTransport:
    """
    Synchronous HTTPS transport built on ``httpx.Client``.

    Open it to reuse one connection across several searches; a call on a
    closed transport opens a connection for that call only.

    Example:
        transport = HttpxTransport()
        with transport:
            status, body = transport.perform_get("/Bing/Search/Web", "Query=%27cat%27", key, key)
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        timeout: float = DEFAULT_TIMEOUT,
        http_transport: Optional[httpx.BaseTransport] = None,
    ):
        self.host = host
        self.timeout = timeout
        self._http_transport = http_transport
        self._client: Optional[httpx.Client] = None

    def _new_client(self) -> httpx.Client:
        return httpx.Client(
            base_url=f"https://{self.host}",
            timeout=self.timeout,
            transport=self._http_transport,
        )

    @property
    def is_open(self) -> bool:
        return self._client is not None

    def open(self) -> "HttpxTransport":
        if self.is_open:
            raise RuntimeError("Already open")
        self._client = self._new_client()
        return self

    def close(self):
        """Close HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HttpxTransport":
        return self.open()

    def __exit__(self, *exc_info):
        self.close()

    def perform_get(
        self, path: str, query_string: str, username: str, password: str
    ) -> Tuple[int, bytes]:
        url = f"{path}?{query_string}" if query_string else path
        auth = httpx.BasicAuth(username, password)
        try:
            if self._client is not None:
                response = self._client.get(url, auth=auth)
            else:
                with self._new_client() as client:
                    response = client.get(url, auth=auth)
        except httpx.HTTPError as e:
            logger.error(f"Bing request to {path} failed: {e}")
            raise TransportError(str(e)) from e
        return response.status_code, response.content
