"""Shared test fixtures for the uptime checker."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.sync_fakes import FIXED_TIMESTAMP, PREVIOUS_TIMESTAMP, REMOTE_MARKER, FakeSyncTool
from uptime.services.uptime_check_service import UptimeChecker, UptimePaths

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture
def uptime_paths(tmp_path: Path) -> UptimePaths:
    folder = tmp_path / "local_uptime_folder"
    return UptimePaths(
        laptop_log=folder / "laptop_uptime_log.txt",
        server_log=folder / "server_uptime_log.txt",
        marker=folder / "latest_uptime.txt",
    )


@pytest.fixture
def online_tool() -> FakeSyncTool:
    return FakeSyncTool({REMOTE_MARKER: f"{PREVIOUS_TIMESTAMP}\n"})


@pytest.fixture
def offline_tool() -> FakeSyncTool:
    return FakeSyncTool({REMOTE_MARKER: f"{PREVIOUS_TIMESTAMP}\n"}, online=False)


@pytest.fixture
def console() -> list[str]:
    return []


@pytest.fixture
def make_checker(
    uptime_paths: UptimePaths, console: list[str]
) -> Callable[..., UptimeChecker]:
    """Build a checker with a fixed clock that records console lines."""

    def _make(tool: FakeSyncTool, timestamp: str = FIXED_TIMESTAMP) -> UptimeChecker:
        return UptimeChecker(
            uptime_paths,
            REMOTE_MARKER,
            tool,
            clock=lambda: timestamp,
            echo=console.append,
        )

    return _make
