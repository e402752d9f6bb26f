"""CLI entry point for the server uptime check."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from uptime.config import Settings
from uptime.services.sync_tool import LocalCopySyncTool, RcloneSyncTool
from uptime.services.uptime_check_service import UptimeChecker

if TYPE_CHECKING:
    from collections.abc import Sequence

    from uptime.services.sync_tool import SyncTool

logger = logging.getLogger(__name__)


def _configure_logging(debug: bool) -> None:
    """Configure logging on stderr; stdout carries the status lines."""
    level = logging.DEBUG if debug else logging.INFO
    fmt = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    logging.basicConfig(
        level=level,
        format=fmt,
        stream=sys.stderr,
        force=True,
    )


def build_sync_tool(settings: Settings) -> SyncTool:
    """Pick the sync backend named in the settings."""
    if settings.sync_backend == "local":
        return LocalCopySyncTool()
    return RcloneSyncTool(
        settings.rclone_binary,
        verbose=settings.rclone_verbose,
        timeout=settings.sync_timeout_seconds,
    )


def load_settings(args: argparse.Namespace) -> Settings:
    """Build settings from env/.env, letting explicit CLI flags win."""
    overrides: dict[str, object] = {}
    if args.dir is not None:
        overrides["local_dir"] = Path(args.dir)
    if args.remote is not None:
        overrides["remote_marker"] = args.remote
    if args.backend is not None:
        overrides["sync_backend"] = args.backend
    if args.rclone is not None:
        overrides["rclone_binary"] = args.rclone
    if args.timeout is not None:
        overrides["sync_timeout_seconds"] = args.timeout
    if args.quiet_rclone:
        overrides["rclone_verbose"] = False
    if args.debug:
        overrides["debug"] = True
    return Settings(**overrides)  # type: ignore[arg-type]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uptime-check",
        description="Log local uptime and check that the remote marker can be exchanged",
    )
    parser.add_argument(
        "--dir", "-d", help="Local uptime folder (default: ../local_uptime_folder)"
    )
    parser.add_argument("--remote", "-r", help="Remote marker path given to the sync tool")
    parser.add_argument(
        "--backend",
        choices=["rclone", "local"],
        help="Sync backend; 'local' copies between local paths for debugging",
    )
    parser.add_argument("--rclone", help="rclone executable (default: rclone)")
    parser.add_argument(
        "--timeout",
        type=float,
        help="Give up on a transfer after this many seconds (default: wait forever)",
    )
    parser.add_argument(
        "--quiet-rclone",
        action="store_true",
        help="Do not pass --verbose to rclone",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args)
    except ValidationError as exc:
        print(f"Error: invalid configuration: {exc}")
        sys.exit(1)

    _configure_logging(settings.debug)
    logger.debug(
        "Checking %s via %s backend, local folder %s",
        settings.remote_marker,
        settings.sync_backend,
        settings.local_dir,
    )
    checker = UptimeChecker(
        settings.paths(),
        settings.remote_marker,
        build_sync_tool(settings),
    )
    checker.run()


if __name__ == "__main__":
    main()
