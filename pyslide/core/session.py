"""Request pipeline: build, execute through the transport, decode."""

from __future__ import annotations

import logging
import time
from typing import Any, TypeVar

from pyslide.core.decoder import ExpectedStatus, ResponseDecoder
from pyslide.core.request_builder import QueryParams, RequestBuilder
from pyslide.errors import ApiError
from pyslide.transport.base import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ApiSession:
    """Runs single API calls for resource clients and paginators.

    Holds no per-call state; every call builds its own request and reads its
    own response, so one session can serve concurrent callers.
    """

    def __init__(
        self,
        builder: RequestBuilder,
        transport: Transport,
        decoder: ResponseDecoder | None = None,
    ) -> None:
        self._builder = builder
        self._transport = transport
        self._decoder = decoder or ResponseDecoder()

    async def call(
        self,
        method: str,
        template: str,
        *,
        expected_status: ExpectedStatus,
        model: Any = None,
        resource_id: str | None = None,
        query: QueryParams | None = None,
        body: Any = None,
    ) -> Any:
        """Execute one request and decode its response into ``model``.

        Transport errors propagate untouched; status and decode failures
        surface as ``ApiError`` and ``DecodeError``.
        """
        request = self._builder.build(
            method, template, resource_id=resource_id, query=query, body=body
        )

        started = time.monotonic()
        response = await self._transport.execute(request)
        duration_ms = round((time.monotonic() - started) * 1000, 1)

        logger.debug(
            "%s %s -> %d",
            request.method,
            request.path,
            response.status_code,
            extra={
                "method": request.method,
                "path": request.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )

        try:
            return self._decoder.decode(response, expected_status, model)
        except ApiError as exc:
            logger.warning(
                "Slide API returned %d for %s %s: %s",
                exc.status_code,
                request.method,
                request.path,
                exc.message,
                extra={
                    "method": request.method,
                    "path": request.path,
                    "status_code": exc.status_code,
                },
            )
            raise
