"""Generic list envelope and error body models.

Every Slide listing endpoint answers with the same envelope:
{ pagination: { total, next_offset }, data: [T, ...] }
``next_offset`` is omitted on the last page.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Pagination(BaseModel):
    """Server-reported pagination state for one page."""

    total: int | None = Field(default=None, ge=0)
    next_offset: int | None = Field(default=None, ge=0)


class ListResponse(BaseModel, Generic[T]):
    """One page of a paginated listing, in server order."""

    pagination: Pagination = Field(default_factory=Pagination)
    data: list[T] = Field(default_factory=list)


class ApiErrorBody(BaseModel):
    """Structured error payload returned with non-success statuses."""

    model_config = ConfigDict(extra="allow")

    message: str | None = None
    codes: list[str] = Field(default_factory=list)
    details: list[Any] = Field(default_factory=list)
