"""Scripted transport that replays queued responses and validates requests.

Each ``execute`` call pops the next record, checks the outgoing request
against its expectation and returns the scripted response. Records are
consumed strictly in order and exactly once; an extra call, a mismatched
request or a leftover record raises ``UnexpectedRequestError``.
"""

from __future__ import annotations

import json
from collections import Counter, deque
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from pyslide.errors import UnexpectedRequestError
from pyslide.transport.base import ApiRequest, RawResponse

QueryExpectation = Union[Mapping[str, Union[str, Sequence[str]]], Sequence[tuple[str, str]]]

_JSON_HEADERS = (("Content-Type", "application/json"),)
_NO_BODY = object()


def _query_pairs(query: QueryExpectation) -> list[tuple[str, str]]:
    if isinstance(query, Mapping):
        pairs = []
        for key, values in query.items():
            if isinstance(values, str):
                values = [values]
            pairs.extend((key, str(value)) for value in values)
        return pairs
    return [(key, str(value)) for key, value in query]


@dataclass(frozen=True)
class ExpectedRequest:
    """What the next outgoing request must look like.

    ``query`` is compared as a multiset, so an empty expectation only matches
    a request that carries no query parameters at all. ``body`` is compared
    after JSON parsing; leave it unset to skip the body check.
    """

    method: str
    path: str
    query: QueryExpectation = ()
    body: Any = _NO_BODY
    validator: Callable[[ApiRequest], None] | None = None

    def check(self, request: ApiRequest) -> None:
        if request.method.upper() != self.method.upper():
            raise UnexpectedRequestError(
                f"expected method {self.method!r}, got {request.method!r} for {request.path}"
            )
        if request.path != self.path:
            raise UnexpectedRequestError(
                f"expected path {self.path!r}, got {request.path!r}"
            )
        expected_query = Counter(_query_pairs(self.query))
        actual_query = Counter(request.query)
        if expected_query != actual_query:
            raise UnexpectedRequestError(
                f"query mismatch for {request.path}: expected "
                f"{sorted(expected_query.elements())}, got {sorted(actual_query.elements())}"
            )
        if self.body is not _NO_BODY:
            actual_body = json.loads(request.body) if request.body else None
            if actual_body != self.body:
                raise UnexpectedRequestError(
                    f"body mismatch for {request.path}: expected {self.body!r}, got {actual_body!r}"
                )
        if self.validator is not None:
            self.validator(request)


@dataclass(frozen=True)
class ScriptedResponse:
    """Canned response served for one queued request."""

    status_code: int
    content: bytes = b""
    headers: tuple[tuple[str, str], ...] = field(default=())

    @classmethod
    def from_file(cls, status_code: int, path: str | Path) -> ScriptedResponse:
        """Serve the bytes of a JSON fixture file."""
        return cls(status_code, Path(path).read_bytes(), _JSON_HEADERS)

    @classmethod
    def from_json(cls, status_code: int, payload: Any) -> ScriptedResponse:
        return cls(status_code, json.dumps(payload).encode("utf-8"), _JSON_HEADERS)

    @classmethod
    def no_content(cls, status_code: int = 204) -> ScriptedResponse:
        return cls(status_code)

    def to_raw(self) -> RawResponse:
        return RawResponse(self.status_code, self.content, self.headers)


class QueuedTransport:
    """Transport that serves queued responses in order.

    Parameters
    ----------
    records:
        Ordered (expected request, scripted response) pairs.
    """

    def __init__(
        self, records: Iterable[tuple[ExpectedRequest, ScriptedResponse]] = ()
    ) -> None:
        self._records: deque[tuple[ExpectedRequest, ScriptedResponse]] = deque(records)
        self.requests: list[ApiRequest] = []

    def enqueue(self, expected: ExpectedRequest, response: ScriptedResponse) -> None:
        self._records.append((expected, response))

    @property
    def remaining(self) -> int:
        return len(self._records)

    async def execute(self, request: ApiRequest) -> RawResponse:
        self.requests.append(request)
        if not self._records:
            raise UnexpectedRequestError(
                f"no queued response left for {request.method} {request.path}"
            )
        expected, response = self._records.popleft()
        expected.check(request)
        return response.to_raw()

    def assert_exhausted(self) -> None:
        """Fail if any queued record was never consumed."""
        if self._records:
            pending = ", ".join(f"{exp.method} {exp.path}" for exp, _ in self._records)
            raise UnexpectedRequestError(
                f"{len(self._records)} queued request(s) never issued: {pending}"
            )
