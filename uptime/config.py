"""Uptime checker configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from uptime.services.uptime_check_service import UptimePaths

DEFAULT_REMOTE_MARKER = (
    "nxc_admin:/Admin and Ken share/server_uptime_folder/latest_uptime.txt"
)


class Settings(BaseSettings):
    """Uptime checker settings."""

    model_config = SettingsConfigDict(
        env_prefix="UPTIME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Local files
    local_dir: Path = Path("../local_uptime_folder")
    laptop_log_name: str = "laptop_uptime_log.txt"
    server_log_name: str = "server_uptime_log.txt"
    marker_name: str = "latest_uptime.txt"

    # Remote side
    remote_marker: str = DEFAULT_REMOTE_MARKER
    sync_backend: Literal["rclone", "local"] = "rclone"
    rclone_binary: str = "rclone"
    rclone_verbose: bool = True
    # None keeps the sync tool running until it exits on its own
    sync_timeout_seconds: float | None = Field(default=None, gt=0)

    def paths(self) -> UptimePaths:
        """Resolve the three local files used by a run."""
        return UptimePaths(
            laptop_log=self.local_dir / self.laptop_log_name,
            server_log=self.local_dir / self.server_log_name,
            marker=self.local_dir / self.marker_name,
        )
