"""Decodes raw responses into typed results or structured API errors."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import Any, TypeVar, Union, overload

from pydantic import TypeAdapter, ValidationError

from pyslide.errors import ApiError, DecodeError, api_error_for_status
from pyslide.models.responses import ApiErrorBody
from pyslide.transport.base import RawResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

ExpectedStatus = Union[int, Collection[int]]

_error_body_adapter = TypeAdapter(ApiErrorBody)


class ResponseDecoder:
    """Checks the status code and validates the body against a model.

    Type adapters are cached per model so repeated list calls do not rebuild
    their validators.
    """

    def __init__(self) -> None:
        self._adapters: dict[Any, TypeAdapter[Any]] = {}

    @overload
    def decode(self, response: RawResponse, expected_status: ExpectedStatus, model: None) -> None: ...

    @overload
    def decode(self, response: RawResponse, expected_status: ExpectedStatus, model: type[T]) -> T: ...

    def decode(self, response, expected_status, model):
        """Return the decoded success body, or raise.

        Raises
        ------
        ApiError
            Status is not one the operation accepts.
        DecodeError
            Status was accepted but the body does not match ``model``.
        """
        accepted = {expected_status} if isinstance(expected_status, int) else set(expected_status)
        if response.status_code not in accepted:
            raise self.decode_error(response)

        if model is None:
            return None

        try:
            return self._adapter(model).validate_json(response.content)
        except ValidationError as exc:
            logger.warning(
                "Could not decode %d response as %s: %d validation error(s)",
                response.status_code,
                getattr(model, "__name__", model),
                exc.error_count(),
            )
            raise DecodeError(
                f"Could not decode response as {getattr(model, '__name__', model)}",
                status_code=response.status_code,
            ) from exc

    @staticmethod
    def decode_error(response: RawResponse) -> ApiError:
        """Build an ApiError from a non-success response.

        Bodies that are not a JSON error object are kept as raw text.
        """
        body: ApiErrorBody | None = None
        if response.content:
            try:
                body = _error_body_adapter.validate_json(response.content)
            except ValidationError:
                body = None
        return api_error_for_status(response.status_code, body=body, raw_body=response.text)

    def _adapter(self, model: Any) -> TypeAdapter[Any]:
        adapter = self._adapters.get(model)
        if adapter is None:
            adapter = TypeAdapter(model)
            self._adapters[model] = adapter
        return adapter
