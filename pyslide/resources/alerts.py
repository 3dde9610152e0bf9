"""Alerts raised against devices and agents."""

from __future__ import annotations

import asyncio

from pyslide.core.paginator import PageConsumer
from pyslide.models.requests import AlertUpdatePayload, ListOptions
from pyslide.models.schemas import Alert
from pyslide.resources.base import ResourceClient


class AlertsClient(ResourceClient):
    path = "/v1/alert"

    async def list(
        self,
        consumer: PageConsumer[Alert],
        options: ListOptions | None = None,
        cancel: asyncio.Event | None = None,
    ) -> None:
        await self._list(self.path, Alert, consumer, options, cancel)

    async def get(self, alert_id: str) -> Alert:
        return await self._get(alert_id, Alert)

    async def update(self, alert_id: str, resolved: bool) -> Alert:
        """Mark an alert resolved (or reopen it)."""
        return await self._session.call(
            "PATCH",
            self.path,
            resource_id=alert_id,
            body=AlertUpdatePayload(resolved=resolved),
            expected_status=200,
            model=Alert,
        )
