"""Shared plumbing for resource clients."""

from __future__ import annotations

import asyncio
from typing import TypeVar

from pyslide.core.paginator import PageConsumer, Paginator
from pyslide.core.session import ApiSession
from pyslide.models.requests import ListOptions

T = TypeVar("T")


class ResourceClient:
    """Stateless facade over an ApiSession for one API entity.

    Subclasses only choose paths, methods, expected status codes and models.
    """

    path: str = ""

    def __init__(self, session: ApiSession) -> None:
        self._session = session

    async def _list(
        self,
        path: str,
        item_model: type[T],
        consumer: PageConsumer[T],
        options: ListOptions | None = None,
        cancel: asyncio.Event | None = None,
        *,
        resource_id: str | None = None,
    ) -> None:
        paginator = Paginator(
            self._session,
            path,
            item_model,
            resource_id=resource_id,
            query=options.to_query() if options is not None else None,
            cancel=cancel,
        )
        await paginator.paginate(consumer)

    async def _get(self, resource_id: str, model: type[T]) -> T:
        return await self._session.call(
            "GET", self.path, resource_id=resource_id, expected_status=200, model=model
        )

    async def _delete(self, resource_id: str) -> None:
        await self._session.call(
            "DELETE", self.path, resource_id=resource_id, expected_status=204
        )
