"""Offset-cursor pagination over Slide listing endpoints.

The first request carries no offset; every following request carries the
``next_offset`` reported by the previous page. The loop ends when the server
omits ``next_offset``, when the items seen reach ``pagination.total``, or
when a page comes back empty. A ``next_offset`` that does not move forward
is a protocol violation and fails fast instead of re-requesting forever.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import aclosing
from typing import Any, Generic, Optional, TypeVar, Union

from pyslide.core.request_builder import normalize_query
from pyslide.core.session import ApiSession
from pyslide.errors import PaginationError, RequestCancelledError
from pyslide.models.responses import ListResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

PageConsumer = Callable[
    [ListResponse[T]], Union[None, BaseException, Awaitable[Optional[BaseException]]]
]


class Paginator(Generic[T]):
    """Drives repeated GETs against one listing endpoint.

    Args:
        session: Session used to issue each page request.
        path: Listing path, e.g. "/v1/agent".
        item_model: Model each entry of ``data`` is decoded into.
        resource_id: Fills the ``{id}`` placeholder of ``path``, if any.
        query: Base query parameters sent with every page.
        cancel: Optional event; when set, the next page fetch is refused.
    """

    def __init__(
        self,
        session: ApiSession,
        path: str,
        item_model: type[T],
        *,
        resource_id: str | None = None,
        query: Any = None,
        cancel: asyncio.Event | None = None,
    ) -> None:
        self._session = session
        self._path = path
        self._resource_id = resource_id
        self._page_model = ListResponse[item_model]  # type: ignore[valid-type]
        # The server-reported offset is the only cursor.
        self._query = tuple(pair for pair in normalize_query(query) if pair[0] != "offset")
        self._cancel = cancel

    async def pages(self) -> AsyncIterator[ListResponse[T]]:
        """Yield pages in ascending offset order, one request at a time."""
        offset: int | None = None
        seen = 0

        while True:
            if self._cancel is not None and self._cancel.is_set():
                raise RequestCancelledError(
                    f"Listing {self._path} cancelled", path=self._path, offset=offset
                )

            query = list(self._query)
            if offset is not None:
                query.append(("offset", str(offset)))

            page: ListResponse[T] = await self._session.call(
                "GET",
                self._path,
                expected_status=200,
                model=self._page_model,
                resource_id=self._resource_id,
                query=query,
            )
            seen += len(page.data)
            next_offset = page.pagination.next_offset

            logger.debug(
                "Fetched page of %s",
                self._path,
                extra={"path": self._path, "offset": offset or 0, "page_items": len(page.data)},
            )

            total = page.pagination.total
            exhausted = (
                next_offset is None
                or not page.data
                or (total is not None and seen >= total)
            )

            if not exhausted and next_offset <= (offset or 0):
                logger.error(
                    "Server returned non-increasing offset %d after %d for %s",
                    next_offset,
                    offset or 0,
                    self._path,
                )
                raise PaginationError(
                    f"next_offset {next_offset} does not advance past {offset or 0} for {self._path}",
                    path=self._path,
                    offset=offset or 0,
                    next_offset=next_offset,
                )

            yield page

            if exhausted:
                return
            offset = next_offset

    async def paginate(self, consumer: PageConsumer[T]) -> None:
        """Feed every page to ``consumer``.

        The consumer may be sync or async. Any exception it raises, or
        returns, stops the loop before the next page is requested and
        propagates unchanged. Any other non-None return is a TypeError.
        """
        async with aclosing(self.pages()) as pages:
            async for page in pages:
                result = consumer(page)
                if inspect.isawaitable(result):
                    result = await result
                if isinstance(result, BaseException):
                    raise result
                if result is not None:
                    raise TypeError(
                        f"page consumer must return None or an exception, got {type(result).__name__}"
                    )

    async def collect(self) -> list[T]:
        """Return every item across all pages, in server order."""
        items: list[T] = []
        async with aclosing(self.pages()) as pages:
            async for page in pages:
                items.extend(page.data)
        return items
