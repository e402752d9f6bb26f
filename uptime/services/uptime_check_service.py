"""Uptime check: records local liveness and probes the remote via the marker file.

A run goes:

1. read the clock once,
2. append the timestamp to the laptop log,
3. delete the local marker,
4. try to fetch the remote marker,
5. treat the marker's presence as proof that the remote answered,
6. if it did, log the timestamp to the server log, rewrite the marker
   with it and push the marker back.

Nothing in a run is fatal.  Overlapping runs are not guarded against and
must not be scheduled.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from uptime.exceptions import SyncToolError
from uptime.services import uptime_log_service
from uptime.services.clock_service import current_timestamp

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from uptime.services.sync_tool import SyncTool

logger = logging.getLogger(__name__)

MSG_CONNECTED = "Successfully connected to server."
MSG_NOT_CONNECTED = "Failed to connect to server."
MSG_FETCH_ERROR = "Error during file retrieval attempt."
MSG_UPLOAD_ERROR = "Error during file upload attempt."


@dataclass(frozen=True)
class UptimePaths:
    laptop_log: Path
    server_log: Path
    marker: Path

    @property
    def folder(self) -> Path:
        return self.marker.parent


@dataclass
class RunReport:
    timestamp: str
    reachable: bool = False
    laptop_logged: bool = False
    marker_reset: bool = False
    server_logged: bool = False
    marker_refreshed: bool = False
    uploaded: bool = False
    elapsed_seconds: float = 0.0


def did_remote_fetch_succeed(marker: Path) -> bool:
    """Return True if the fetch left a marker file behind.

    Only meaningful right after the marker was reset: with the old copy
    gone, the file can only exist if the fetch wrote it.  A fetch that
    writes part of the file and then fails still counts as reachable.
    """
    return marker.is_file()


class UptimeChecker:
    """Runs one uptime check against a single remote marker."""

    def __init__(
        self,
        paths: UptimePaths,
        remote_marker: str,
        sync_tool: SyncTool,
        *,
        clock: Callable[[], str] = current_timestamp,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.paths = paths
        self.remote_marker = remote_marker
        self.sync_tool = sync_tool
        self.clock = clock
        self.echo = echo

    def _transfer(self, source: str, destination: str, error_message: str) -> bool:
        """Copy via the sync tool; report launch failures without raising."""
        try:
            result = self.sync_tool.copy(source, destination)
        except SyncToolError as exc:
            logger.error("Sync tool failed for %s -> %s: %s", source, destination, exc)
            self.echo(error_message)
            return False
        return result.ok

    def fetch_marker(self) -> bool:
        """Pull the remote marker onto the local marker path."""
        return self._transfer(self.remote_marker, str(self.paths.marker), MSG_FETCH_ERROR)

    def push_marker(self) -> bool:
        """Push the local marker back to the remote."""
        return self._transfer(str(self.paths.marker), self.remote_marker, MSG_UPLOAD_ERROR)

    def run(self) -> RunReport:
        started = time.perf_counter()
        report = RunReport(timestamp=self.clock())
        paths = self.paths

        uptime_log_service.ensure_folder(paths.folder)
        report.laptop_logged = uptime_log_service.append_line(
            paths.laptop_log, report.timestamp
        ).ok
        report.marker_reset = uptime_log_service.remove_marker(paths.marker).ok

        fetch_ok = self.fetch_marker()
        report.reachable = did_remote_fetch_succeed(paths.marker)
        if fetch_ok != report.reachable:
            # The exit status is informational only; the marker decides.
            logger.info(
                "Fetch reported ok=%s but marker present=%s", fetch_ok, report.reachable
            )

        if report.reachable:
            self.echo(MSG_CONNECTED)
            report.server_logged = uptime_log_service.append_line(
                paths.server_log, report.timestamp
            ).ok
            report.marker_refreshed = uptime_log_service.overwrite_line(
                paths.marker, report.timestamp
            ).ok
            report.uploaded = self.push_marker()
        else:
            self.echo(MSG_NOT_CONNECTED)

        report.elapsed_seconds = time.perf_counter() - started
        self.echo(f"Finished running script in {report.elapsed_seconds:g} seconds.")
        logger.info(
            "Uptime check at %s: reachable=%s uploaded=%s",
            report.timestamp,
            report.reachable,
            report.uploaded,
        )
        return report
