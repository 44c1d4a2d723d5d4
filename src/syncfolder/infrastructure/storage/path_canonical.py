"""Folder path canonicalization.

Turns user-supplied folder paths into absolute, platform-formatted strings:
- POSIX paths end with exactly one separator so a trailing symlink is
  followed when the path is used as a directory root.
- Windows paths carry the ``\\\\?\\`` long-path prefix unless they are UNC.

Every helper takes an explicit ``PlatformFamily`` so both conventions can be
exercised on any host.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
from enum import Enum
from types import ModuleType
from typing import Optional


LONG_PATH_PREFIX = "\\\\?\\"
UNC_PREFIX = "\\\\"


class PlatformFamily(str, Enum):
    """Path convention a folder is prepared under."""

    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def current(cls) -> "PlatformFamily":
        return cls.WINDOWS if os.name == "nt" else cls.POSIX

    @classmethod
    def parse(cls, value: object) -> "PlatformFamily":
        """Resolve ``auto``/``posix``/``windows`` (or a member) to a family."""
        if isinstance(value, cls):
            return value
        raw = str(value or "").strip().lower()
        if raw in ("", "auto"):
            return cls.current()
        if raw in ("nt", "win", "win32"):
            return cls.WINDOWS
        try:
            return cls(raw)
        except ValueError as exc:
            raise ValueError(f"unknown platform family: {value!r}") from exc

    @property
    def pathmod(self) -> ModuleType:
        return ntpath if self is PlatformFamily.WINDOWS else posixpath

    @property
    def sep(self) -> str:
        return self.pathmod.sep


def _family(platform: Optional[PlatformFamily]) -> PlatformFamily:
    return PlatformFamily.current() if platform is None else platform


def fix_path(path: str, platform: Optional[PlatformFamily] = None) -> str:
    """Normalize a directory path to a single canonical directory form.

    ``dirname(path + sep)`` collapses any run of trailing separators and turns
    a bare drive (``C:``) into its root (``C:\\``):

        C:           ->  C:\\
        C:\\somedir   ->  C:\\somedir
        C:\\somedir\\  ->  C:\\somedir
        /a/b///      ->  /a/b/

    On POSIX exactly one trailing separator is then appended. Callers must not
    pass an empty string.
    """
    family = _family(platform)
    mod = family.pathmod
    sep = family.sep

    fixed = mod.normpath(mod.dirname(path + sep))
    if family is PlatformFamily.POSIX:
        # normpath keeps a leading "//" on POSIX; a lexical clean does not.
        if fixed.startswith("//"):
            fixed = sep + fixed.lstrip(sep)
        if not fixed.endswith(sep):
            fixed = fixed + sep
    return fixed


def expand_tilde(path: str, platform: Optional[PlatformFamily] = None) -> str:
    """Expand a leading ``~`` or ``~user``; unknown users leave it unchanged."""
    return _family(platform).pathmod.expanduser(path)


def canonicalize_path(raw: str, platform: Optional[PlatformFamily] = None) -> str:
    """Return ``raw`` tilde-expanded, absolute and platform-formatted.

    Each step keeps the previous value when it cannot complete, so this never
    raises. An empty input stays empty.
    """
    if raw == "":
        return ""

    family = _family(platform)
    mod = family.pathmod
    cleaned = raw

    try:
        cleaned = expand_tilde(cleaned, family)
    except (KeyError, OSError):
        pass

    # isabs is pure string work; abspath may hit getcwd.
    if not mod.isabs(cleaned):
        try:
            cleaned = mod.abspath(cleaned)
        except (OSError, ValueError):
            pass

    if family is PlatformFamily.WINDOWS:
        if mod.isabs(cleaned) and not cleaned.startswith(UNC_PREFIX):
            return LONG_PATH_PREFIX + cleaned
        return cleaned

    if not cleaned.endswith(family.sep):
        cleaned = cleaned + family.sep
    return cleaned


def is_descendant(
    root: str,
    candidate: str,
    platform: Optional[PlatformFamily] = None,
) -> bool:
    """True when ``candidate`` lies inside ``root`` (inclusive)."""
    if not root or not candidate:
        return False
    family = _family(platform)
    mod = family.pathmod
    try:
        relative = mod.relpath(candidate, root)
    except (OSError, ValueError):
        return False
    return not (relative == mod.pardir or relative.startswith(mod.pardir + family.sep))


def contained_temp_path(
    folder_path: str,
    temp_path: str,
    platform: Optional[PlatformFamily] = None,
) -> str:
    """Return ``temp_path`` if it is under ``folder_path``, else ``folder_path``."""
    if temp_path and not is_descendant(folder_path, temp_path, platform):
        return folder_path
    return temp_path
