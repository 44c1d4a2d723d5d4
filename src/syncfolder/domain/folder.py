"""Folder configuration record.

A ``FolderConfiguration`` keeps the user's raw path fields next to their
canonical forms. ``prepare()`` computes the canonical forms once; ``path`` and
``temp_path`` then only read the cached values, so copies of a prepared
record (for example the values of ``folder_map``) are cheap to query.

Mutating ``raw_path`` or ``temp_dir_path`` does not refresh the cache. Call
``prepare()`` again after changing them.
"""

from __future__ import annotations

import json
from copy import copy as shallow_copy
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Protocol

import structlog

from syncfolder.config import settings
from syncfolder.domain.devices import FolderDeviceConfiguration, sort_devices
from syncfolder.domain.errors import InvalidFolderConfigError, MarkerError
from syncfolder.domain.intervals import clamp_rescan_interval
from syncfolder.domain.versioning import VersioningConfiguration
from syncfolder.infrastructure.config.settings_utils import coerce_int, parse_bool
from syncfolder.infrastructure.storage import marker as marker_io
from syncfolder.infrastructure.storage.path_canonical import (
    PlatformFamily,
    canonicalize_path,
    contained_temp_path,
    fix_path,
)

logger = structlog.get_logger()


class DiagnosticLogger(Protocol):
    def info(self, event: str, **kw: Any) -> Any: ...


class FolderType(str, Enum):
    READ_WRITE = "readwrite"
    READ_ONLY = "readonly"


class PullOrder(str, Enum):
    RANDOM = "random"
    ALPHABETIC = "alphabetic"
    SMALLEST_FIRST = "smallestFirst"
    LARGEST_FIRST = "largestFirst"
    OLDEST_FIRST = "oldestFirst"
    NEWEST_FIRST = "newestFirst"


_INT_FIELDS = (
    "rescan_interval_s",
    "copiers",
    "pullers",
    "hashers",
    "scan_progress_interval_s",
    "puller_sleep_s",
    "puller_pause_s",
    "max_conflicts",
)

_BOOL_FIELDS = (
    "ignore_perms",
    "auto_normalize",
    "ignore_delete",
    "disable_sparse_files",
    "disable_temp_indexes",
    "fsync",
    "disable_weak_hash",
    "paused",
)


def _default_platform() -> PlatformFamily:
    return settings.platform_family


@dataclass
class FolderConfiguration:
    """Configuration of one synchronized folder."""

    folder_id: str
    label: str = ""
    raw_path: str = ""
    folder_type: FolderType = FolderType.READ_WRITE
    devices: List[FolderDeviceConfiguration] = field(default_factory=list)
    rescan_interval_s: int = 0
    ignore_perms: bool = False
    auto_normalize: bool = False
    min_disk_free_pct: float = 0.0
    versioning: VersioningConfiguration = field(default_factory=VersioningConfiguration)
    copiers: int = 0  # files handled concurrently
    pullers: int = 0  # blocks fetched concurrently
    hashers: int = 0  # less than one means one per core
    order: PullOrder = PullOrder.RANDOM
    ignore_delete: bool = False
    scan_progress_interval_s: int = 0
    puller_sleep_s: int = 0
    puller_pause_s: int = 0
    max_conflicts: int = 0
    disable_sparse_files: bool = False
    disable_temp_indexes: bool = False
    fsync: bool = False
    disable_weak_hash: bool = False
    paused: bool = False
    temp_dir_path: str = ""

    platform: PlatformFamily = field(default_factory=_default_platform, compare=False)
    diagnostic_logger: Optional[DiagnosticLogger] = field(
        default=None, repr=False, compare=False
    )

    _cached_path: str = field(default="", init=False, repr=False, compare=False)
    _cached_temp_dir: str = field(default="", init=False, repr=False, compare=False)
    _prepared: bool = field(default=False, init=False, repr=False, compare=False)

    @classmethod
    def new(cls, folder_id: str, path: str, **fields: Any) -> "FolderConfiguration":
        """Create and prepare a folder rooted at ``path``."""
        folder = cls(folder_id=folder_id, raw_path=path, **fields)
        folder.prepare()
        return folder

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        *,
        platform: Optional[PlatformFamily] = None,
    ) -> "FolderConfiguration":
        """Build a prepared folder from a plain mapping (inverse of ``to_dict``)."""
        folder_id = str(data.get("id") or "").strip()
        if not folder_id:
            raise InvalidFolderConfigError("folder id is required")

        try:
            folder_type = FolderType(data.get("type") or FolderType.READ_WRITE.value)
            order = PullOrder(data.get("order") or PullOrder.RANDOM.value)
        except ValueError as e:
            raise InvalidFolderConfigError(f"folder {folder_id!r}: {e}") from e

        try:
            devices = [
                FolderDeviceConfiguration.from_dict(item)
                for item in data.get("devices") or []
            ]
        except (KeyError, TypeError) as e:
            raise InvalidFolderConfigError(
                f"folder {folder_id!r}: malformed device entry"
            ) from e

        try:
            versioning = VersioningConfiguration.from_dict(data.get("versioning"))
        except (AttributeError, TypeError) as e:
            raise InvalidFolderConfigError(
                f"folder {folder_id!r}: malformed versioning section"
            ) from e

        fields: Dict[str, Any] = {
            name: coerce_int(data.get(name), 0) for name in _INT_FIELDS
        }
        fields.update(
            {name: parse_bool(data.get(name), default=False) for name in _BOOL_FIELDS}
        )
        try:
            fields["min_disk_free_pct"] = float(data.get("min_disk_free_pct") or 0.0)
        except (TypeError, ValueError):
            fields["min_disk_free_pct"] = 0.0
        if platform is not None:
            fields["platform"] = platform

        folder = cls(
            folder_id=folder_id,
            label=str(data.get("label") or ""),
            raw_path=str(data.get("path") or ""),
            folder_type=folder_type,
            devices=devices,
            versioning=versioning,
            order=order,
            temp_dir_path=str(data.get("temp_dir_path") or ""),
            **fields,
        )
        folder.prepare()
        return folder

    def to_dict(self) -> Dict[str, Any]:
        """Raw fields only; canonical paths are recomputed on load."""
        data: Dict[str, Any] = {
            "id": self.folder_id,
            "label": self.label,
            "path": self.raw_path,
            "type": self.folder_type.value,
            "devices": [device.to_dict() for device in self.devices],
            "min_disk_free_pct": self.min_disk_free_pct,
            "versioning": self.versioning.to_dict(),
            "order": self.order.value,
            "temp_dir_path": self.temp_dir_path,
        }
        data.update({name: getattr(self, name) for name in _INT_FIELDS})
        data.update({name: getattr(self, name) for name in _BOOL_FIELDS})
        return data

    def copy(self) -> "FolderConfiguration":
        """Copy that shares no device list or versioning params with ``self``."""
        clone = shallow_copy(self)
        clone.devices = [replace(device) for device in self.devices]
        clone.versioning = self.versioning.copy()
        return clone

    @property
    def _log(self) -> DiagnosticLogger:
        return self.diagnostic_logger or logger

    @property
    def path(self) -> str:
        """Canonical folder path."""
        if not self._prepared and self.raw_path != "":
            self._log.info("uncached_path_call", folder_id=self.folder_id)
            return self._cleaned_path()
        return self._cached_path

    @property
    def temp_path(self) -> str:
        """Directory in which temporary files should be created."""
        if not self._prepared and (self.temp_dir_path != "" or self.raw_path != ""):
            self._log.info("uncached_temp_path_call", folder_id=self.folder_id)
            return self._resolve_temp_path(self._cleaned_path())
        return self._cached_temp_dir

    def prepare(self) -> None:
        """Normalize the raw paths and refresh every derived value."""
        if self.raw_path:
            self.raw_path = fix_path(self.raw_path, self.platform)
        if self.temp_dir_path:
            self.temp_dir_path = fix_path(self.temp_dir_path, self.platform)

        self._cached_path = self._cleaned_path()
        self._cached_temp_dir = self._resolve_temp_path(self._cached_path)

        self.rescan_interval_s = clamp_rescan_interval(self.rescan_interval_s)

        if self.versioning is None:
            self.versioning = VersioningConfiguration()
        if self.versioning.params is None:
            self.versioning.params = {}

        self._prepared = True

    def _cleaned_path(self) -> str:
        return canonicalize_path(self.raw_path, self.platform)

    def _resolve_temp_path(self, folder_path: str) -> str:
        if self.temp_dir_path == "":
            return folder_path
        tentative = canonicalize_path(self.temp_dir_path, self.platform)
        # A temp dir outside the folder is ignored in favor of the folder root.
        return contained_temp_path(folder_path, tentative, self.platform)

    def has_marker(self) -> bool:
        path = self.path
        return bool(path) and marker_io.has_marker(path)

    def create_marker(self) -> str:
        """Create the folder marker if missing and return its path."""
        path = self.path
        if not path:
            raise MarkerError(f"folder {self.folder_id!r} has no path")
        return marker_io.create_marker(path, fsync=settings.io_fsync)

    def description(self) -> str:
        if not self.label:
            return self.folder_id
        return f"{json.dumps(self.label, ensure_ascii=False)} ({self.folder_id})"

    def device_ids(self) -> List[Any]:
        return [device.device_id for device in self.devices]

    def sort_devices(self) -> None:
        """Order ``devices`` by ascending device id, in place."""
        self.devices = sort_devices(self.devices)


def folder_map(folders: Iterable[FolderConfiguration]) -> Dict[str, FolderConfiguration]:
    """Copies of ``folders`` keyed by folder id."""
    return {folder.folder_id: folder.copy() for folder in folders}
