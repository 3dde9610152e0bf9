"""Unit tests for devices, snapshots, clients, alerts and users."""

from __future__ import annotations

import pytest

from pyslide.models import (
    Client,
    ClientPayload,
    ClientUpdatePayload,
    DeviceUpdatePayload,
    ListOptions,
    Snapshot,
    User,
)
from pyslide.transport.queue import ExpectedRequest, ScriptedResponse


def _page(items: list[dict], total: int, next_offset: int | None = None) -> dict:
    pagination: dict = {"total": total}
    if next_offset is not None:
        pagination["next_offset"] = next_offset
    return {"pagination": pagination, "data": items}


class TestDevices:
    @pytest.mark.asyncio
    async def test_get_device(self, queued_service) -> None:
        service = queued_service(
            (
                ExpectedRequest("GET", "/v1/device/d_0123456789ab"),
                ScriptedResponse.from_json(
                    200,
                    {
                        "device_id": "d_0123456789ab",
                        "display_name": "Office Box",
                        "storage_used_bytes": 1024,
                        "storage_total_bytes": 4096,
                        "last_seen_at": "2024-08-23T01:25:08Z",
                    },
                ),
            ),
        )

        device = await service.devices.get("d_0123456789ab")

        assert device.display_name == "Office Box"
        assert device.storage_total_bytes == 4096

    @pytest.mark.asyncio
    async def test_update_sends_only_set_fields(self, queued_service) -> None:
        service = queued_service(
            (
                ExpectedRequest(
                    "PATCH", "/v1/device/d_0123456789ab", body={"display_name": "Renamed"}
                ),
                ScriptedResponse.from_json(
                    200, {"device_id": "d_0123456789ab", "display_name": "Renamed"}
                ),
            ),
        )

        device = await service.devices.update(
            "d_0123456789ab", DeviceUpdatePayload(display_name="Renamed")
        )

        assert device.display_name == "Renamed"

    @pytest.mark.asyncio
    async def test_list_passes_options_as_query(self, queued_service) -> None:
        service = queued_service(
            (
                ExpectedRequest(
                    "GET",
                    "/v1/device",
                    query=[("limit", "50"), ("sort_asc", "false"), ("client_id", "c_1")],
                ),
                ScriptedResponse.from_json(200, _page([{"device_id": "d_1"}], total=1)),
            ),
        )
        seen = []

        await service.devices.list(
            lambda page: seen.extend(page.data),
            ListOptions(limit=50, sort_asc=False, filters={"client_id": "c_1"}),
        )

        assert [d.device_id for d in seen] == ["d_1"]


class TestSnapshots:
    @pytest.mark.asyncio
    async def test_list_and_get(self, queued_service) -> None:
        snapshot = {
            "snapshot_id": "s_1",
            "agent_id": "a_1",
            "backup_started_at": "2024-08-23T01:25:08Z",
            "locations": [{"type": "local", "device_id": "d_1"}],
        }
        service = queued_service(
            (
                ExpectedRequest("GET", "/v1/snapshot"),
                ScriptedResponse.from_json(200, _page([snapshot], total=1)),
            ),
            (
                ExpectedRequest("GET", "/v1/snapshot/s_1"),
                ScriptedResponse.from_json(200, snapshot),
            ),
        )
        listed: list[Snapshot] = []

        await service.snapshots.list(lambda page: listed.extend(page.data))
        fetched = await service.snapshots.get("s_1")

        assert listed == [fetched]
        assert fetched.locations[0].device_id == "d_1"


class TestClients:
    @pytest.mark.asyncio
    async def test_create_update_delete(self, queued_service) -> None:
        service = queued_service(
            (
                ExpectedRequest("POST", "/v1/client", body={"name": "Acme"}),
                ScriptedResponse.from_json(201, {"client_id": "c_1", "name": "Acme"}),
            ),
            (
                ExpectedRequest("PATCH", "/v1/client/c_1", body={"comments": "priority"}),
                ScriptedResponse.from_json(
                    200, {"client_id": "c_1", "name": "Acme", "comments": "priority"}
                ),
            ),
            (
                ExpectedRequest("DELETE", "/v1/client/c_1"),
                ScriptedResponse.no_content(),
            ),
        )

        created = await service.clients.create(ClientPayload(name="Acme"))
        updated = await service.clients.update("c_1", ClientUpdatePayload(comments="priority"))
        await service.clients.delete("c_1")

        assert created == Client(client_id="c_1", name="Acme")
        assert updated.comments == "priority"


class TestAlerts:
    @pytest.mark.asyncio
    async def test_resolve_alert(self, queued_service) -> None:
        service = queued_service(
            (
                ExpectedRequest("PATCH", "/v1/alert/al_1", body={"resolved": True}),
                ScriptedResponse.from_json(
                    200,
                    {
                        "alert_id": "al_1",
                        "alert_type": "device_not_checking_in",
                        "resolved": True,
                        "resolved_at": "2024-08-23T01:25:08Z",
                    },
                ),
            ),
        )

        alert = await service.alerts.update("al_1", resolved=True)

        assert alert.resolved is True
        assert alert.resolved_at is not None


class TestUsers:
    @pytest.mark.asyncio
    async def test_get_user_with_escaped_id(self, queued_service) -> None:
        service = queued_service(
            (
                ExpectedRequest("GET", "/v1/user/u%2F1"),
                ScriptedResponse.from_json(200, {"user_id": "u/1", "email": "ops@example.com"}),
            ),
        )

        user = await service.users.get("u/1")

        assert user == User(user_id="u/1", email="ops@example.com")
