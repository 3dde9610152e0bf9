"""Transport package: the request-execution contract and its implementations."""

from pyslide.transport.base import ApiRequest, RawResponse, Transport
from pyslide.transport.http import HttpxTransport
from pyslide.transport.queue import ExpectedRequest, QueuedTransport, ScriptedResponse

__all__ = [
    "ApiRequest",
    "ExpectedRequest",
    "HttpxTransport",
    "QueuedTransport",
    "RawResponse",
    "ScriptedResponse",
    "Transport",
]
