"""Sync tool: copies one file between the local folder and the remote endpoint."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from uptime.exceptions import SyncToolError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CopyResult:
    source: str
    destination: str
    ok: bool
    returncode: int = 0
    detail: str = ""


class SyncTool(Protocol):
    """Copies ``source`` to ``destination``, overwriting the destination.

    A copy that ran but failed comes back as a ``CopyResult`` with
    ``ok=False``.  Any other failure must be raised as ``SyncToolError``;
    ``UptimeChecker`` does not catch anything else.
    """

    def copy(self, source: str, destination: str) -> CopyResult: ...


class RcloneSyncTool:
    """Wraps ``rclone copyto`` for single-file transfers.

    Credentials and remote definitions live in rclone's own config; this
    class only passes paths through.
    """

    def __init__(
        self,
        binary: str = "rclone",
        *,
        verbose: bool = True,
        timeout: float | None = None,
    ) -> None:
        self.binary = binary
        self.verbose = verbose
        self.timeout = timeout

    def _command(self, source: str, destination: str) -> list[str]:
        cmd = [self.binary, "copyto", source, destination]
        if self.verbose:
            cmd.append("--verbose")
        return cmd

    def _run(self, cmd: list[str]) -> subprocess.CompletedProcess[str]:
        """Run rclone, wrapping launch failures in SyncToolError."""
        try:
            return subprocess.run(
                cmd,
                check=False,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as exc:
            msg = f"{self.binary} did not finish within {self.timeout} seconds"
            raise SyncToolError(msg) from exc
        except OSError as exc:
            msg = f"Could not run {self.binary}: {exc}"
            raise SyncToolError(msg) from exc

    def copy(self, source: str, destination: str) -> CopyResult:
        cmd = self._command(source, destination)
        logger.debug("Running %s", cmd)
        result = self._run(cmd)
        stderr = result.stderr.strip() if result.stderr else ""
        if result.returncode != 0:
            logger.warning(
                "rclone copyto exited %d: %s",
                result.returncode,
                stderr or "no stderr",
            )
        elif stderr:
            # rclone writes its --verbose transfer log to stderr
            logger.debug("rclone: %s", stderr)
        return CopyResult(
            source=source,
            destination=destination,
            ok=result.returncode == 0,
            returncode=result.returncode,
            detail=stderr,
        )


class LocalCopySyncTool:
    """Copies between two local paths; stands in for a remote during debugging."""

    def copy(self, source: str, destination: str) -> CopyResult:
        src = Path(source)
        if not src.is_file():
            logger.warning("Local copy source is missing: %s", src)
            return CopyResult(
                source=source,
                destination=destination,
                ok=False,
                returncode=1,
                detail="source missing",
            )
        try:
            dest = Path(destination)
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(src, dest)
        except OSError as exc:
            msg = f"Local copy {source} -> {destination} failed: {exc}"
            raise SyncToolError(msg) from exc
        return CopyResult(source=source, destination=destination, ok=True)
