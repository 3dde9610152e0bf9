"""Clients: customer accounts that devices and agents belong to."""

from __future__ import annotations

import asyncio

from pyslide.core.paginator import PageConsumer
from pyslide.models.requests import ClientPayload, ClientUpdatePayload, ListOptions
from pyslide.models.schemas import Client
from pyslide.resources.base import ResourceClient


class ClientsClient(ResourceClient):
    path = "/v1/client"

    async def list(
        self,
        consumer: PageConsumer[Client],
        options: ListOptions | None = None,
        cancel: asyncio.Event | None = None,
    ) -> None:
        await self._list(self.path, Client, consumer, options, cancel)

    async def get(self, client_id: str) -> Client:
        return await self._get(client_id, Client)

    async def create(self, payload: ClientPayload) -> Client:
        return await self._session.call(
            "POST", self.path, body=payload, expected_status=201, model=Client
        )

    async def update(self, client_id: str, payload: ClientUpdatePayload) -> Client:
        return await self._session.call(
            "PATCH",
            self.path,
            resource_id=client_id,
            body=payload,
            expected_status=200,
            model=Client,
        )

    async def delete(self, client_id: str) -> None:
        await self._delete(client_id)
