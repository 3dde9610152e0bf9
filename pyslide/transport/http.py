"""httpx-backed transport for talking to the real Slide API."""

from __future__ import annotations

import logging

import httpx

from pyslide.transport.base import ApiRequest, RawResponse

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Sends requests through an ``httpx.AsyncClient``.

    Parameters
    ----------
    client:
        Pre-configured async client to use. When omitted, one is created
        and owned by the transport, and released by ``aclose()``.
    timeout_seconds:
        Per-request timeout for an owned client (default 30).
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout_seconds: float = 30.0,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)

    async def execute(self, request: ApiRequest) -> RawResponse:
        """Issue the request once; httpx errors propagate unchanged."""
        response = await self._client.request(
            request.method,
            request.url,
            params=list(request.query),
            headers=list(request.headers),
            content=request.body,
        )
        return RawResponse(
            status_code=response.status_code,
            content=response.content,
            headers=tuple(response.headers.items()),
        )

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()
            logger.debug("Closed owned httpx client")
