"""Backups: individual backup runs."""

from __future__ import annotations

import asyncio

from pyslide.core.paginator import PageConsumer
from pyslide.models.requests import BackupStartPayload, ListOptions
from pyslide.models.schemas import Backup
from pyslide.resources.base import ResourceClient


class BackupsClient(ResourceClient):
    path = "/v1/backup"

    async def list(
        self,
        consumer: PageConsumer[Backup],
        options: ListOptions | None = None,
        cancel: asyncio.Event | None = None,
    ) -> None:
        await self._list(self.path, Backup, consumer, options, cancel)

    async def get(self, backup_id: str) -> Backup:
        return await self._get(backup_id, Backup)

    async def start_backup(self, agent_id: str) -> None:
        """Queue a backup for an agent; the API accepts it with 202."""
        await self._session.call(
            "POST",
            self.path,
            body=BackupStartPayload(agent_id=agent_id),
            expected_status=202,
        )
