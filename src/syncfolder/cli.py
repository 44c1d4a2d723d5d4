"""Command line entry point.

Usage:
    syncfolder resolve <path> [--temp-dir DIR] [--rescan-interval N] [--platform P] [--json]
    syncfolder marker <path> [--create]
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, Sequence

import structlog

from syncfolder import __version__
from syncfolder.config import settings
from syncfolder.domain.errors import SyncFolderError
from syncfolder.domain.folder import FolderConfiguration
from syncfolder.infrastructure.storage.path_canonical import PlatformFamily

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="syncfolder",
        description="Resolve synchronized folder paths and manage folder markers",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Print the prepared paths of a folder")
    resolve.add_argument("path", help="Folder path (relative and ~ paths are allowed)")
    resolve.add_argument("--temp-dir", default="", help="Temporary directory inside the folder")
    resolve.add_argument("--rescan-interval", type=int, default=0, help="Rescan interval in seconds")
    resolve.add_argument(
        "--platform",
        choices=["auto", "posix", "windows"],
        default=None,
        help="Path convention (default: SYNCFOLDER_PLATFORM or auto)",
    )
    resolve.add_argument("--id", dest="folder_id", default="default", help="Folder id")
    resolve.add_argument("--json", action="store_true", help="Print JSON")

    marker = subparsers.add_parser("marker", help="Check or create the folder marker")
    marker.add_argument("path", help="Folder path")
    marker.add_argument("--create", action="store_true", help="Create the marker if missing")

    return parser


def _cmd_resolve(args: argparse.Namespace) -> int:
    platform = PlatformFamily.parse(args.platform) if args.platform else settings.platform_family
    folder = FolderConfiguration.new(
        args.folder_id,
        args.path,
        temp_dir_path=args.temp_dir,
        rescan_interval_s=args.rescan_interval,
        platform=platform,
    )
    result = {
        "id": folder.folder_id,
        "platform": folder.platform.value,
        "raw_path": folder.raw_path,
        "path": folder.path,
        "temp_path": folder.temp_path,
        "rescan_interval_s": folder.rescan_interval_s,
    }
    if args.json:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    else:
        for key, value in result.items():
            print(f"{key}: {value}")
    return 0


def _cmd_marker(args: argparse.Namespace) -> int:
    folder = FolderConfiguration.new("default", args.path)
    if args.create:
        marker = folder.create_marker()
        print(marker)
        return 0
    present = folder.has_marker()
    print("present" if present else "absent")
    return 0 if present else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings.setup_logging()

    handlers = {
        "resolve": _cmd_resolve,
        "marker": _cmd_marker,
    }
    try:
        return handlers[args.command](args)
    except SyncFolderError as e:
        logger.error("command_failed", command=args.command, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
