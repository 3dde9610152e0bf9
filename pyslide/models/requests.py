"""Request payload models and list options."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

# Query keys owned by ListOptions fields and the paginator's cursor.
RESERVED_QUERY_KEYS = frozenset({"offset", "limit", "sort_by", "sort_asc"})


class ListOptions(BaseModel):
    """Optional paging, sorting and filter parameters for list calls.

    Left at its defaults, no query parameters are produced.
    """

    limit: int | None = Field(default=None, ge=1)
    sort_by: str | None = None
    sort_asc: bool | None = None
    filters: dict[str, str] = Field(default_factory=dict)

    @field_validator("filters")
    @classmethod
    def _check_filters(cls, value: dict[str, str]) -> dict[str, str]:
        reserved = sorted(RESERVED_QUERY_KEYS.intersection(value))
        if reserved:
            raise ValueError(f"filters may not set reserved keys: {', '.join(reserved)}")
        return value

    def to_query(self) -> list[tuple[str, object]]:
        """Render the options as ordered query pairs."""
        pairs: list[tuple[str, object]] = []
        if self.limit is not None:
            pairs.append(("limit", self.limit))
        if self.sort_by is not None:
            pairs.append(("sort_by", self.sort_by))
        if self.sort_asc is not None:
            pairs.append(("sort_asc", self.sort_asc))
        pairs.extend(sorted(self.filters.items()))
        return pairs


class AgentPairPayload(BaseModel):
    device_id: str = Field(..., min_length=1)
    pair_code: str = Field(..., min_length=1)


class AgentAutoPairPayload(BaseModel):
    device_id: str = Field(..., min_length=1)
    display_name: str | None = None


class AgentUpdatePayload(BaseModel):
    display_name: str


class BackupStartPayload(BaseModel):
    agent_id: str = Field(..., min_length=1)


class FileRestorePayload(BaseModel):
    """Mount a snapshot on a device for file-level restore."""

    device_id: str = Field(..., min_length=1)
    snapshot_id: str = Field(..., min_length=1)


class DeviceUpdatePayload(BaseModel):
    display_name: str | None = None
    hostname: str | None = None
    client_id: str | None = None


class ClientPayload(BaseModel):
    name: str = Field(..., min_length=1)
    comments: str | None = None


class ClientUpdatePayload(BaseModel):
    name: str | None = None
    comments: str | None = None


class AlertUpdatePayload(BaseModel):
    resolved: bool
