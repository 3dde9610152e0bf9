"""Builds immutable ApiRequest descriptors for Slide API calls."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any, Union
from urllib.parse import quote

from pydantic import BaseModel

from pyslide.transport.base import ApiRequest

QueryParams = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def normalize_query(query: QueryParams | None) -> tuple[tuple[str, str], ...]:
    """Convert query parameters into ordered string pairs.

    None values are dropped; a missing query yields an empty tuple.
    """
    if query is None:
        return ()
    items = query.items() if isinstance(query, Mapping) else query
    return tuple((str(key), _query_value(value)) for key, value in items if value is not None)


def encode_body(body: Any) -> bytes:
    """Serialize a pydantic model or JSON-compatible value to UTF-8 JSON."""
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json", exclude_none=True)
    return json.dumps(body, separators=(",", ":")).encode("utf-8")


class RequestBuilder:
    """Attaches base URL, bearer auth and standard headers to each request.

    Parameters
    ----------
    base_url:
        API root, e.g. "https://api.slide.tech".
    token:
        Bearer token sent in the Authorization header.
    user_agent:
        Value for the User-Agent header.
    """

    def __init__(self, base_url: str, token: str, user_agent: str) -> None:
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._user_agent = user_agent

    def build(
        self,
        method: str,
        template: str,
        *,
        resource_id: str | None = None,
        query: QueryParams | None = None,
        body: Any = None,
    ) -> ApiRequest:
        """Build a request for ``template``.

        ``{id}`` in the template is replaced by the percent-encoded
        ``resource_id``; without the placeholder the id is appended as a
        trailing path segment.
        """
        path = self._expand(template, resource_id)

        headers = [
            ("Authorization", f"Bearer {self._token}"),
            ("Accept", "application/json"),
            ("User-Agent", self._user_agent),
        ]
        content: bytes | None = None
        if body is not None:
            content = encode_body(body)
            headers.append(("Content-Type", "application/json"))

        return ApiRequest(
            method=method.upper(),
            url=f"{self._base_url}{path}",
            path=path,
            query=normalize_query(query),
            headers=tuple(headers),
            body=content,
        )

    @staticmethod
    def _expand(template: str, resource_id: str | None) -> str:
        if resource_id is None:
            if "{id}" in template:
                raise ValueError(f"path template {template!r} requires a resource id")
            return template
        if not resource_id:
            raise ValueError("resource id must not be empty")
        segment = quote(resource_id, safe="")
        if "{id}" in template:
            return template.replace("{id}", segment)
        return f"{template.rstrip('/')}/{segment}"
