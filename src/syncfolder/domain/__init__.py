"""Domain models for syncfolder.

``FolderConfiguration`` lives in ``syncfolder.domain.folder``; it depends on
settings and storage helpers, so it is not re-exported here.
"""

from .devices import FolderDeviceConfiguration, compare_device_ids, device_less, sort_devices
from .errors import InvalidFolderConfigError, MarkerError, SyncFolderError
from .intervals import MAX_RESCAN_INTERVAL_S, clamp_rescan_interval
from .versioning import VersioningConfiguration

__all__ = [
    "FolderDeviceConfiguration",
    "compare_device_ids",
    "device_less",
    "sort_devices",
    "InvalidFolderConfigError",
    "MarkerError",
    "SyncFolderError",
    "MAX_RESCAN_INTERVAL_S",
    "clamp_rescan_interval",
    "VersioningConfiguration",
]
