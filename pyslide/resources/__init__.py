"""Resource clients, one per Slide API entity."""

from pyslide.resources.agents import AgentsClient
from pyslide.resources.alerts import AlertsClient
from pyslide.resources.backups import BackupsClient
from pyslide.resources.base import ResourceClient
from pyslide.resources.clients import ClientsClient
from pyslide.resources.devices import DevicesClient
from pyslide.resources.file_restores import FileRestoresClient
from pyslide.resources.snapshots import SnapshotsClient
from pyslide.resources.users import UsersClient

__all__ = [
    "AgentsClient",
    "AlertsClient",
    "BackupsClient",
    "ClientsClient",
    "DevicesClient",
    "FileRestoresClient",
    "ResourceClient",
    "SnapshotsClient",
    "UsersClient",
]
