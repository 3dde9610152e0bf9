"""Shared test fixtures for the pyslide test suite."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import pytest

from pyslide import SlideService
from pyslide.config.settings import SlideSettings
from pyslide.transport.queue import ExpectedRequest, QueuedTransport, ScriptedResponse

TESTDATA = Path(__file__).parent / "testdata"


# ---------------------------------------------------------------------------
# Keep the environment from leaking into settings
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_slide_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove SLIDE_* variables so tests only see explicit configuration."""
    for name in ("SLIDE_API_TOKEN", "SLIDE_BASE_URL", "SLIDE_TIMEOUT_SECONDS",
                 "SLIDE_USER_AGENT", "SLIDE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Fixture files
# ---------------------------------------------------------------------------

@pytest.fixture
def testdata() -> Path:
    return TESTDATA


@pytest.fixture
def response_file() -> Callable[[int, str], ScriptedResponse]:
    """Scripted response serving ``testdata/responses/<name>``."""

    def _make(status_code: int, name: str) -> ScriptedResponse:
        return ScriptedResponse.from_file(status_code, TESTDATA / "responses" / name)

    return _make


@pytest.fixture
def request_body() -> Callable[[str], Any]:
    """Parsed JSON of ``testdata/requests/<name>``."""

    def _load(name: str) -> Any:
        return json.loads((TESTDATA / "requests" / name).read_text())

    return _load


# ---------------------------------------------------------------------------
# Services backed by a scripted transport
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> SlideSettings:
    return SlideSettings(api_token="fakeToken")


@pytest.fixture
def queued_service() -> Iterable[Callable[..., SlideService]]:
    """Factory for services whose transport replays the given records.

    Every queued record must be consumed by the end of the test.
    """
    transports: list[QueuedTransport] = []

    def _make(*records: tuple[ExpectedRequest, ScriptedResponse]) -> SlideService:
        transport = QueuedTransport(records)
        transports.append(transport)
        return SlideService("fakeToken", transport=transport)

    yield _make

    for transport in transports:
        transport.assert_exhausted()
