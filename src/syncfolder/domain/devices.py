"""Device associations of a folder and their ordering.

Device identifiers are opaque here. Any value works as long as it is totally
ordered, either through a ``compare(other) -> int`` method or through ``<``.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Dict, Iterable, List


@dataclass
class FolderDeviceConfiguration:
    """A device participating in a folder."""

    device_id: Any
    introduced_by: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {"device_id": self.device_id, "introduced_by": self.introduced_by}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FolderDeviceConfiguration":
        return cls(
            device_id=data["device_id"],
            introduced_by=data.get("introduced_by"),
        )


def compare_device_ids(a: Any, b: Any) -> int:
    """Three-way comparison of two device identifiers."""
    compare = getattr(a, "compare", None)
    if callable(compare):
        result = compare(b)
        return (result > 0) - (result < 0)
    return (b < a) - (a < b)


def device_less(a: FolderDeviceConfiguration, b: FolderDeviceConfiguration) -> bool:
    return compare_device_ids(a.device_id, b.device_id) < 0


def _compare_devices(a: FolderDeviceConfiguration, b: FolderDeviceConfiguration) -> int:
    return compare_device_ids(a.device_id, b.device_id)


def sort_devices(devices: Iterable[FolderDeviceConfiguration]) -> List[FolderDeviceConfiguration]:
    """Return the devices ordered by ascending device id.

    ``sorted`` is stable, so entries with equal ids keep their relative order.
    """
    return sorted(devices, key=cmp_to_key(_compare_devices))
