"""Transport contract shared by the real and scripted implementations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class ApiRequest:
    """A fully built request, immutable once constructed.

    ``query`` is always a tuple of (key, value) pairs; it is empty, never
    None, when the call has no query parameters.
    """

    method: str
    url: str
    path: str
    query: tuple[tuple[str, str], ...] = ()
    headers: tuple[tuple[str, str], ...] = ()
    body: bytes | None = None

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None


@dataclass(frozen=True)
class RawResponse:
    """Status, headers and undecoded body of one HTTP response."""

    status_code: int
    content: bytes = b""
    headers: tuple[tuple[str, str], ...] = ()

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


@runtime_checkable
class Transport(Protocol):
    """Executes one request and returns its raw response.

    Implementations must not retry; network failures propagate to the caller.
    """

    async def execute(self, request: ApiRequest) -> RawResponse:
        ...
