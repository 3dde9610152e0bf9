"""Users of the Slide account."""

from __future__ import annotations

import asyncio

from pyslide.core.paginator import PageConsumer
from pyslide.models.requests import ListOptions
from pyslide.models.schemas import User
from pyslide.resources.base import ResourceClient


class UsersClient(ResourceClient):
    path = "/v1/user"

    async def list(
        self,
        consumer: PageConsumer[User],
        options: ListOptions | None = None,
        cancel: asyncio.Event | None = None,
    ) -> None:
        await self._list(self.path, User, consumer, options, cancel)

    async def get(self, user_id: str) -> User:
        return await self._get(user_id, User)
