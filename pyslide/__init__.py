"""Async typed client for the Slide backup and device-management API."""

from pyslide.config import SlideSettings
from pyslide.core import Paginator
from pyslide.errors import (
    ApiError,
    AuthenticationError,
    BadRequestError,
    ConflictError,
    DecodeError,
    NotFoundError,
    PaginationError,
    PermissionDeniedError,
    RateLimitError,
    RequestCancelledError,
    ServerError,
    SlideError,
    UnexpectedRequestError,
)
from pyslide.logging_config import configure_logging
from pyslide.models import ListOptions, ListResponse
from pyslide.service import SlideService
from pyslide.transport import HttpxTransport, QueuedTransport, Transport
from pyslide.version import __version__

__all__ = [
    "ApiError",
    "AuthenticationError",
    "BadRequestError",
    "ConflictError",
    "DecodeError",
    "HttpxTransport",
    "ListOptions",
    "ListResponse",
    "NotFoundError",
    "PaginationError",
    "Paginator",
    "PermissionDeniedError",
    "QueuedTransport",
    "RateLimitError",
    "RequestCancelledError",
    "ServerError",
    "SlideError",
    "SlideService",
    "Transport",
    "UnexpectedRequestError",
    "__version__",
    "configure_logging",
]
