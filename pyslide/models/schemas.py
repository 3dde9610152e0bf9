"""Resource schemas returned by the Slide API.

Timestamps arrive as RFC 3339 strings and are parsed into timezone-aware
datetimes. Optional fields default to None so that sparse responses decode.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Address(BaseModel):
    """Network interface reported by an agent or device."""

    mac: str = ""
    ips: list[str] = Field(default_factory=list)


class Agent(BaseModel):
    """A backup agent installed on a protected machine."""

    agent_id: str
    device_id: str = ""
    display_name: str = ""
    hostname: str = ""
    client_id: str | None = None
    agent_version: str = ""
    os: str = ""
    os_version: str = ""
    platform: str = ""
    manufacturer: str = ""
    firmware_type: str = ""
    encryption_algorithm: str = ""
    public_ip_address: str = ""
    addresses: list[Address] = Field(default_factory=list)
    booted_at: datetime | None = None
    last_seen_at: datetime | None = None


class AgentAutoPairResponse(BaseModel):
    """Result of registering an agent for automatic pairing."""

    agent_id: str
    display_name: str = ""
    pair_code: str = ""


class BackupStatus(str, Enum):
    """Lifecycle state of a backup job."""

    PENDING = "pending"
    STARTED = "started"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELED = "canceled"


class Backup(BaseModel):
    """A single backup run of an agent."""

    backup_id: str
    agent_id: str = ""
    snapshot_id: str | None = None
    status: BackupStatus | None = None
    started_at: datetime | None = None
    ended_at: datetime | None = None
    error_code: int | None = None
    error_message: str | None = None


class FileRestore(BaseModel):
    """A mounted snapshot that can be browsed and downloaded from."""

    file_restore_id: str
    agent_id: str = ""
    device_id: str = ""
    snapshot_id: str = ""
    created_at: datetime | None = None
    expires_at: datetime | None = None


class DownloadURI(BaseModel):
    type: str = ""
    uri: str = ""


class FileRestoreData(BaseModel):
    """A file or directory entry inside a file restore."""

    name: str
    path: str = ""
    type: str = ""
    size: int | None = None
    modified_at: datetime | None = None
    symlink_target_path: str | None = None
    download_uris: list[DownloadURI] = Field(default_factory=list)


class Device(BaseModel):
    """A Slide appliance."""

    device_id: str
    display_name: str = ""
    hostname: str = ""
    serial_number: str = ""
    client_id: str | None = None
    hardware_model_name: str = ""
    service_model_name: str = ""
    service_status: str = ""
    image_version: str = ""
    package_version: str = ""
    public_ip_address: str = ""
    addresses: list[Address] = Field(default_factory=list)
    storage_used_bytes: int | None = None
    storage_total_bytes: int | None = None
    nfr: bool = False
    booted_at: datetime | None = None
    last_seen_at: datetime | None = None


class SnapshotLocation(BaseModel):
    type: str = ""
    device_id: str = ""


class Snapshot(BaseModel):
    """A point-in-time image produced by a successful backup."""

    snapshot_id: str
    agent_id: str = ""
    backup_started_at: datetime | None = None
    backup_ended_at: datetime | None = None
    locations: list[SnapshotLocation] = Field(default_factory=list)
    verify_boot_status: str | None = None
    verify_fs_status: str | None = None
    verify_boot_screenshot_url: str | None = None


class Client(BaseModel):
    """A customer account that devices and agents can be assigned to."""

    client_id: str
    name: str = ""
    comments: str = ""


class Alert(BaseModel):
    """An alert raised against a device or agent."""

    alert_id: str
    alert_type: str = ""
    alert_fields: str = ""
    device_id: str | None = None
    agent_id: str | None = None
    resolved: bool = False
    resolved_by: str | None = None
    created_at: datetime | None = None
    resolved_at: datetime | None = None


class User(BaseModel):
    """A user of the Slide account."""

    user_id: str
    display_name: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    role_id: str = ""
