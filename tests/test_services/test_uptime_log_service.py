"""Tests for uptime log and marker file operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from uptime.services.uptime_log_service import (
    append_line,
    ensure_folder,
    overwrite_line,
    remove_marker,
)

if TYPE_CHECKING:
    from pathlib import Path


class TestAppendLine:
    def test_creates_missing_file(self, tmp_path: Path) -> None:
        log = tmp_path / "laptop_uptime_log.txt"
        result = append_line(log, "2026-10-17T09:41:07+0200")
        assert result.ok is True
        assert log.read_text() == "2026-10-17T09:41:07+0200\n"

    def test_appends_after_existing_content(self, tmp_path: Path) -> None:
        log = tmp_path / "laptop_uptime_log.txt"
        log.write_text("first\n")
        append_line(log, "second")
        assert log.read_text() == "first\nsecond\n"

    def test_missing_folder_is_reported(self, tmp_path: Path) -> None:
        log = tmp_path / "missing" / "laptop_uptime_log.txt"
        result = append_line(log, "x")
        assert result.ok is False
        assert result.error
        assert not log.exists()


class TestOverwriteLine:
    def test_replaces_content(self, tmp_path: Path) -> None:
        marker = tmp_path / "latest_uptime.txt"
        marker.write_text("old\nolder\n")
        result = overwrite_line(marker, "new")
        assert result.ok is True
        assert marker.read_text() == "new\n"

    def test_directory_in_the_way_is_reported(self, tmp_path: Path) -> None:
        marker = tmp_path / "latest_uptime.txt"
        marker.mkdir()
        result = overwrite_line(marker, "new")
        assert result.ok is False


class TestRemoveMarker:
    def test_removes_existing_marker(self, tmp_path: Path) -> None:
        marker = tmp_path / "latest_uptime.txt"
        marker.write_text("stale\n")
        assert remove_marker(marker).ok is True
        assert not marker.exists()

    def test_absent_marker_is_fine(self, tmp_path: Path) -> None:
        marker = tmp_path / "latest_uptime.txt"
        assert remove_marker(marker).ok is True
        assert remove_marker(marker).ok is True

    def test_directory_marker_is_reported(self, tmp_path: Path) -> None:
        marker = tmp_path / "latest_uptime.txt"
        marker.mkdir()
        result = remove_marker(marker)
        assert result.ok is False
        assert marker.is_dir()


class TestEnsureFolder:
    def test_creates_nested_folder(self, tmp_path: Path) -> None:
        folder = tmp_path / "a" / "local_uptime_folder"
        assert ensure_folder(folder).ok is True
        assert folder.is_dir()

    def test_file_in_the_way_is_reported(self, tmp_path: Path) -> None:
        folder = tmp_path / "local_uptime_folder"
        folder.write_text("not a folder")
        assert ensure_folder(folder).ok is False
