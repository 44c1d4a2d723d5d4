"""Folder marker file.

A folder that has been initialized carries an empty ``.stfolder`` file at its
root. Its presence is the only signal that the folder was set up before.
"""

from __future__ import annotations

import os

import structlog

from syncfolder.domain.errors import MarkerError

logger = structlog.get_logger()

MARKER_NAME = ".stfolder"

_FILE_ATTRIBUTE_HIDDEN = 0x2


def marker_path(folder_path: str) -> str:
    return os.path.join(folder_path, MARKER_NAME)


def has_marker(folder_path: str) -> bool:
    """Check whether the marker exists under ``folder_path``."""
    try:
        os.stat(marker_path(folder_path))
    except OSError:
        return False
    return True


def sync_dir(path: str) -> None:
    """Flush directory metadata to disk.

    Directories cannot be opened for fsync on Windows, so this is a no-op there.
    """
    if os.name == "nt":
        return
    fd = os.open(path, os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def hide_file(path: str) -> None:
    """Hide ``path`` from normal listings.

    On POSIX a leading dot already hides the file. On Windows the hidden
    attribute is set.
    """
    if os.name != "nt":
        return
    import ctypes

    if not ctypes.windll.kernel32.SetFileAttributesW(str(path), _FILE_ATTRIBUTE_HIDDEN):
        raise ctypes.WinError()


def create_marker(folder_path: str, *, fsync: bool = True) -> str:
    """Create the marker under ``folder_path`` if it is missing.

    Returns the marker path. Creation failures raise ``MarkerError``; a failed
    directory sync or hide is logged and otherwise ignored.
    """
    marker = marker_path(folder_path)
    if has_marker(folder_path):
        return marker

    try:
        with open(marker, "x", encoding="utf-8"):
            pass
    except FileExistsError:
        return marker
    except OSError as e:
        raise MarkerError(f"cannot create folder marker {marker}: {e}") from e

    parent = os.path.dirname(marker)
    if fsync:
        try:
            sync_dir(parent)
        except OSError as e:
            logger.info("marker_dir_sync_failed", path=parent, error=str(e))

    try:
        hide_file(marker)
    except OSError as e:
        logger.debug("marker_hide_failed", path=marker, error=str(e))

    logger.debug("marker_created", path=marker)
    return marker
