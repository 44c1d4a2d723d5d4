"""Storage infrastructure for syncfolder.

Folder path canonicalization and the folder marker file.
"""

from .path_canonical import (
    LONG_PATH_PREFIX,
    PlatformFamily,
    canonicalize_path,
    contained_temp_path,
    expand_tilde,
    fix_path,
    is_descendant,
)
from .marker import (
    MARKER_NAME,
    create_marker,
    has_marker,
    hide_file,
    marker_path,
    sync_dir,
)

__all__ = [
    # Path canonicalization
    "LONG_PATH_PREFIX",
    "PlatformFamily",
    "canonicalize_path",
    "contained_temp_path",
    "expand_tilde",
    "fix_path",
    "is_descendant",
    # Marker
    "MARKER_NAME",
    "create_marker",
    "has_marker",
    "hide_file",
    "marker_path",
    "sync_dir",
]
