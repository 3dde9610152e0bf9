"""Public models for the Slide API client."""

from pyslide.models.requests import (
    AgentAutoPairPayload,
    AgentPairPayload,
    AgentUpdatePayload,
    AlertUpdatePayload,
    BackupStartPayload,
    ClientPayload,
    ClientUpdatePayload,
    DeviceUpdatePayload,
    FileRestorePayload,
    ListOptions,
)
from pyslide.models.responses import ApiErrorBody, ListResponse, Pagination
from pyslide.models.schemas import (
    Address,
    Agent,
    AgentAutoPairResponse,
    Alert,
    Backup,
    BackupStatus,
    Client,
    Device,
    DownloadURI,
    FileRestore,
    FileRestoreData,
    Snapshot,
    SnapshotLocation,
    User,
)

__all__ = [
    "Address",
    "Agent",
    "AgentAutoPairPayload",
    "AgentAutoPairResponse",
    "AgentPairPayload",
    "AgentUpdatePayload",
    "Alert",
    "AlertUpdatePayload",
    "ApiErrorBody",
    "Backup",
    "BackupStartPayload",
    "BackupStatus",
    "Client",
    "ClientPayload",
    "ClientUpdatePayload",
    "Device",
    "DeviceUpdatePayload",
    "DownloadURI",
    "FileRestore",
    "FileRestoreData",
    "FileRestorePayload",
    "ListOptions",
    "ListResponse",
    "Pagination",
    "Snapshot",
    "SnapshotLocation",
    "User",
]
