"""HTTP client for the Tolstoy API."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

import httpx


class Client:
    """HTTP client wrapper for the Tolstoy API.

    Holds the base URL, default headers and timeout shared by every endpoint
    call, and lazily creates pooled httpx clients configured with them.

    Besides serving the generated endpoint functions, the client exposes
    generic async verbs (``get``, ``post``, ``put``, ``patch``, ``delete``)
    for routes that have no generated function yet.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: httpx.Timeout | None = None,
        headers: Mapping[str, str] | None = None,
        raise_on_unexpected_status: bool = True,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout or httpx.Timeout(30.0)
        self._headers = MappingProxyType(dict(headers or {}))
        self.raise_on_unexpected_status = raise_on_unexpected_status
        self._async_client: httpx.AsyncClient | None = None
        self._sync_client: httpx.Client | None = None

    @property
    def headers(self) -> Mapping[str, str]:
        """Read-only view of the default headers sent with every request."""
        return self._headers

    def get_httpx_client(self) -> httpx.Client:
        """Get synchronous httpx client."""
        if self._sync_client is None:
            self._sync_client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=dict(self._headers),
            )
        return self._sync_client

    def get_async_httpx_client(self) -> httpx.AsyncClient:
        """Get asynchronous httpx client."""
        if self._async_client is None:
            self._async_client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=dict(self._headers),
            )
        return self._async_client

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Send an arbitrary request relative to ``base_url``.

        Keyword arguments are passed straight to ``httpx.AsyncClient.request``.
        The response is returned as-is, whatever its status code.
        """
        return await self.get_async_httpx_client().request(method, url, **kwargs)

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PUT", url, **kwargs)

    async def patch(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PATCH", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", url, **kwargs)

    async def aclose(self) -> None:
        """Close async client."""
        if self._async_client is not None:
            await self._async_client.aclose()
            self._async_client = None

    def close(self) -> None:
        """Close sync client."""
        if self._sync_client is not None:
            self._sync_client.close()
            self._sync_client = None
