"""Unit tests for SlideService construction and logging of calls."""

from __future__ import annotations

import logging

import pytest

from pyslide import SlideService
from pyslide.config.settings import SlideSettings
from pyslide.transport.http import HttpxTransport
from pyslide.transport.queue import ExpectedRequest, QueuedTransport, ScriptedResponse


class TestConstruction:
    def test_validates_at_construction(self):
        with pytest.raises(Exception):
            SlideService("", transport=QueuedTransport())

    def test_defaults_to_owned_httpx_transport(self):
        service = SlideService("fakeToken")
        assert isinstance(service._transport, HttpxTransport)
        assert service.settings.base_url == "https://api.slide.tech"

    def test_from_settings(self, settings: SlideSettings):
        transport = QueuedTransport()
        service = SlideService.from_settings(settings, transport=transport)
        assert service.settings is settings
        assert service._transport is transport

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SLIDE_API_TOKEN", "env-token")
        service = SlideService.from_env(transport=QueuedTransport())
        assert service.settings.api_token == "env-token"

    def test_resource_clients_are_stable(self):
        service = SlideService("fakeToken", transport=QueuedTransport())
        assert service.agents is service.agents
        assert service.file_restores is service.file_restores

    @pytest.mark.asyncio
    async def test_custom_base_url_used(self):
        seen = []
        transport = QueuedTransport(
            [
                (
                    ExpectedRequest("GET", "/v1/user/u_1", validator=seen.append),
                    ScriptedResponse.from_json(200, {"user_id": "u_1"}),
                )
            ]
        )
        service = SlideService(
            "fakeToken", base_url="https://eu.slide.tech/", transport=transport
        )

        await service.users.get("u_1")

        assert seen[0].url == "https://eu.slide.tech/v1/user/u_1"


class TestCallLogging:
    @pytest.mark.asyncio
    async def test_logs_call_without_token(self, caplog: pytest.LogCaptureFixture):
        transport = QueuedTransport(
            [
                (
                    ExpectedRequest("GET", "/v1/user/u_1"),
                    ScriptedResponse.from_json(200, {"user_id": "u_1"}),
                )
            ]
        )
        service = SlideService("tk_supersecret", transport=transport)

        with caplog.at_level(logging.DEBUG, logger="pyslide"):
            await service.users.get("u_1")

        records = [r for r in caplog.records if r.name == "pyslide.core.session"]
        assert records
        assert records[0].status_code == 200
        assert all("tk_supersecret" not in r.getMessage() for r in caplog.records)

    @pytest.mark.asyncio
    async def test_api_error_logged_as_warning(self, caplog: pytest.LogCaptureFixture):
        transport = QueuedTransport(
            [
                (
                    ExpectedRequest("GET", "/v1/user/u_1"),
                    ScriptedResponse.from_json(401, {"message": "bad token"}),
                )
            ]
        )
        service = SlideService("fakeToken", transport=transport)

        with caplog.at_level(logging.WARNING, logger="pyslide"):
            with pytest.raises(Exception):
                await service.users.get("u_1")

        assert any(r.levelno == logging.WARNING and "401" in r.getMessage() for r in caplog.records)
