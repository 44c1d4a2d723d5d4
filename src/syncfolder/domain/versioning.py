"""Versioning configuration carried by a folder.

The versioning behavior itself lives elsewhere; a folder only holds the
selected type and its string parameters.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class VersioningConfiguration:
    """Versioner type plus its parameters."""

    type: str = ""
    params: Optional[Dict[str, str]] = None

    def copy(self) -> "VersioningConfiguration":
        """Return a copy that does not share the parameter mapping."""
        params = dict(self.params) if self.params is not None else None
        return VersioningConfiguration(type=self.type, params=params)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "params": dict(self.params or {})}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "VersioningConfiguration":
        data = data or {}
        params = data.get("params")
        return cls(
            type=str(data.get("type") or ""),
            params={str(k): str(v) for k, v in params.items()} if params is not None else None,
        )
