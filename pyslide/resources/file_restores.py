"""File restores: mounted snapshots for browsing and downloading files."""

from __future__ import annotations

import asyncio

from pyslide.core.paginator import PageConsumer
from pyslide.models.requests import FileRestorePayload, ListOptions
from pyslide.models.schemas import FileRestore, FileRestoreData
from pyslide.resources.base import ResourceClient


class FileRestoresClient(ResourceClient):
    path = "/v1/restore/file"

    async def list(
        self,
        consumer: PageConsumer[FileRestore],
        options: ListOptions | None = None,
        cancel: asyncio.Event | None = None,
    ) -> None:
        await self._list(self.path, FileRestore, consumer, options, cancel)

    async def get(self, file_restore_id: str) -> FileRestore:
        return await self._get(file_restore_id, FileRestore)

    async def create(self, payload: FileRestorePayload) -> FileRestore:
        """Mount a snapshot on a device and return the new file restore."""
        return await self._session.call(
            "POST", self.path, body=payload, expected_status=201, model=FileRestore
        )

    async def delete(self, file_restore_id: str) -> None:
        await self._delete(file_restore_id)

    async def browse(
        self,
        file_restore_id: str,
        consumer: PageConsumer[FileRestoreData],
        options: ListOptions | None = None,
        cancel: asyncio.Event | None = None,
    ) -> None:
        """Page through the entries of a mounted file restore."""
        await self._list(
            f"{self.path}/{{id}}/browse",
            FileRestoreData,
            consumer,
            options,
            cancel,
            resource_id=file_restore_id,
        )
