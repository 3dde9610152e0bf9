"""Devices: Slide appliances."""

from __future__ import annotations

import asyncio

from pyslide.core.paginator import PageConsumer
from pyslide.models.requests import DeviceUpdatePayload, ListOptions
from pyslide.models.schemas import Device
from pyslide.resources.base import ResourceClient


class DevicesClient(ResourceClient):
    path = "/v1/device"

    async def list(
        self,
        consumer: PageConsumer[Device],
        options: ListOptions | None = None,
        cancel: asyncio.Event | None = None,
    ) -> None:
        await self._list(self.path, Device, consumer, options, cancel)

    async def get(self, device_id: str) -> Device:
        return await self._get(device_id, Device)

    async def update(self, device_id: str, payload: DeviceUpdatePayload) -> Device:
        """Patch the fields set on ``payload``; unset fields are left alone."""
        return await self._session.call(
            "PATCH",
            self.path,
            resource_id=device_id,
            body=payload,
            expected_status=200,
            model=Device,
        )
