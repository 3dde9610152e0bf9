"""Entry point: one SlideService per API token.

The service validates its settings once, wires the request pipeline to a
transport and hands out a resource client per entity. Nothing on it is
mutated after construction.
"""

from __future__ import annotations

import logging
from types import TracebackType

from pyslide.config.settings import SlideSettings
from pyslide.core.decoder import ResponseDecoder
from pyslide.core.request_builder import RequestBuilder
from pyslide.core.session import ApiSession
from pyslide.resources import (
    AgentsClient,
    AlertsClient,
    BackupsClient,
    ClientsClient,
    DevicesClient,
    FileRestoresClient,
    SnapshotsClient,
    UsersClient,
)
from pyslide.transport.base import Transport
from pyslide.transport.http import HttpxTransport

logger = logging.getLogger(__name__)


class SlideService:
    """Async client for the Slide API.

    Parameters
    ----------
    token:
        API bearer token.
    base_url:
        API root (default "https://api.slide.tech").
    timeout_seconds:
        Request timeout used when the service creates its own transport.
    transport:
        Transport to send requests through. Defaults to an owned
        ``HttpxTransport``; pass a ``QueuedTransport`` in tests.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        transport: Transport | None = None,
    ) -> None:
        overrides: dict[str, object] = {"api_token": token}
        if base_url is not None:
            overrides["base_url"] = base_url
        if timeout_seconds is not None:
            overrides["timeout_seconds"] = timeout_seconds
        self._setup(SlideSettings(**overrides), transport)

    @classmethod
    def from_settings(
        cls, settings: SlideSettings, transport: Transport | None = None
    ) -> SlideService:
        service = cls.__new__(cls)
        service._setup(settings, transport)
        return service

    @classmethod
    def from_env(cls, transport: Transport | None = None) -> SlideService:
        """Build a service from SLIDE_* environment variables."""
        return cls.from_settings(SlideSettings(), transport)

    def _setup(self, settings: SlideSettings, transport: Transport | None) -> None:
        self._settings = settings
        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpxTransport(
            timeout_seconds=settings.timeout_seconds
        )
        self._session = ApiSession(
            RequestBuilder(settings.base_url, settings.api_token, settings.user_agent),
            self._transport,
            ResponseDecoder(),
        )

        self._agents = AgentsClient(self._session)
        self._alerts = AlertsClient(self._session)
        self._backups = BackupsClient(self._session)
        self._clients = ClientsClient(self._session)
        self._devices = DevicesClient(self._session)
        self._file_restores = FileRestoresClient(self._session)
        self._snapshots = SnapshotsClient(self._session)
        self._users = UsersClient(self._session)

        logger.debug("Slide service configured for %s", settings.base_url)

    @property
    def settings(self) -> SlideSettings:
        return self._settings

    @property
    def agents(self) -> AgentsClient:
        return self._agents

    @property
    def alerts(self) -> AlertsClient:
        return self._alerts

    @property
    def backups(self) -> BackupsClient:
        return self._backups

    @property
    def clients(self) -> ClientsClient:
        return self._clients

    @property
    def devices(self) -> DevicesClient:
        return self._devices

    @property
    def file_restores(self) -> FileRestoresClient:
        return self._file_restores

    @property
    def snapshots(self) -> SnapshotsClient:
        return self._snapshots

    @property
    def users(self) -> UsersClient:
        return self._users

    async def aclose(self) -> None:
        """Release the transport if the service created it."""
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.aclose()

    async def __aenter__(self) -> SlideService:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
