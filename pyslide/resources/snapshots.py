"""Snapshots: point-in-time images produced by backups."""

from __future__ import annotations

import asyncio

from pyslide.core.paginator import PageConsumer
from pyslide.models.requests import ListOptions
from pyslide.models.schemas import Snapshot
from pyslide.resources.base import ResourceClient


class SnapshotsClient(ResourceClient):
    path = "/v1/snapshot"

    async def list(
        self,
        consumer: PageConsumer[Snapshot],
        options: ListOptions | None = None,
        cancel: asyncio.Event | None = None,
    ) -> None:
        await self._list(self.path, Snapshot, consumer, options, cancel)

    async def get(self, snapshot_id: str) -> Snapshot:
        return await self._get(snapshot_id, Snapshot)
