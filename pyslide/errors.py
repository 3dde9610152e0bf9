"""Error hierarchy for the Slide API client.

All client-specific errors extend SlideError. API errors carry the HTTP status
code and the decoded server error body; decode, pagination and cancellation
failures are separate branches so callers can tell them apart. Network errors
raised by httpx are not wrapped and propagate as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyslide.models.responses import ApiErrorBody


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class SlideError(Exception):
    """Base error for all Slide client errors."""

    status_code: int | None = None
    message: str = "Slide client error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class ApiError(SlideError):
    """The API answered with a status the operation does not accept."""

    message = "Slide API error"

    def __init__(
        self,
        status_code: int,
        body: ApiErrorBody | None = None,
        raw_body: str = "",
        message: str | None = None,
        **kwargs: object,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.raw_body = raw_body
        if message is None:
            server_message = body.message if body is not None else None
            message = f"{self.__class__.message} (HTTP {status_code})"
            if server_message:
                message = f"{message}: {server_message}"
        super().__init__(message, **kwargs)

    @property
    def codes(self) -> list[str]:
        """Machine-readable error codes reported by the server, if any."""
        return list(self.body.codes) if self.body is not None else []


class BadRequestError(ApiError):
    """Malformed request or invalid payload (400)."""

    message = "Bad request"


class AuthenticationError(ApiError):
    """Invalid or missing API token (401)."""

    message = "Invalid or missing API token"


class PermissionDeniedError(ApiError):
    """Token lacks access to the resource (403)."""

    message = "Permission denied"


class NotFoundError(ApiError):
    """Resource not found (404)."""

    message = "Resource not found"


class ConflictError(ApiError):
    """Resource state conflict (409)."""

    message = "Conflict"


class RateLimitError(ApiError):
    """Too many requests (429)."""

    message = "Rate limit exceeded"


class ServerError(ApiError):
    """Server-side failure (5xx)."""

    message = "Slide API server error"


class DecodeError(SlideError):
    """A success response body could not be decoded into the expected type."""

    message = "Could not decode response body"


class PaginationError(SlideError):
    """The server violated the offset pagination contract."""

    message = "Pagination offset did not advance"


class RequestCancelledError(SlideError):
    """The caller cancelled the operation before it completed."""

    message = "Request cancelled"


class UnexpectedRequestError(AssertionError):
    """A scripted transport received a request it was not told to expect."""


# ---------------------------------------------------------------------------
# Status mapping
# ---------------------------------------------------------------------------

_STATUS_ERRORS: dict[int, type[ApiError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def api_error_for_status(
    status_code: int,
    body: ApiErrorBody | None = None,
    raw_body: str = "",
) -> ApiError:
    """Build the most specific ApiError subclass for an HTTP status code."""
    if status_code >= 500:
        return ServerError(status_code, body=body, raw_body=raw_body)
    error_cls = _STATUS_ERRORS.get(status_code, ApiError)
    return error_cls(status_code, body=body, raw_body=raw_body)
