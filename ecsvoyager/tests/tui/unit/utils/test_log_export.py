"""Unit tests for log export."""

from __future__ import annotations

from datetime import datetime

from ecsvoyager.models.logs.log_entry import LogEntry
from ecsvoyager.utils.log_export import export_file_name, export_logs


class TestExportFileName:
    """Tests for export_file_name."""

    def test_timestamped_name(self) -> None:
        """Test the logs_<label>_<timestamp>.txt pattern."""
        name = export_file_name("web-1", datetime(2024, 3, 5, 14, 7, 9))
        assert name == "logs_web-1_20240305_140709.txt"

    def test_unsafe_characters_replaced(self) -> None:
        """Test that path separators in the label are sanitized."""
        name = export_file_name("task/prod:1", datetime(2024, 1, 1))
        assert "/" not in name
        assert name.startswith("logs_task_prod_1_")


class TestExportLogs:
    """Tests for export_logs."""

    def test_writes_one_line_per_entry(self, tmp_path) -> None:
        """Test that entries are written in order, one line each."""
        entries = [
            LogEntry(timestamp=0, message="INFO started", source="app"),
            LogEntry(timestamp=1000, message="ERROR failed", source="app"),
        ]
        path = export_logs(entries, tmp_path / "out", "web-1", datetime(2024, 1, 2, 3, 4, 5))

        assert path == tmp_path / "out" / "logs_web-1_20240102_030405.txt"
        assert path.read_text(encoding="utf-8").splitlines() == [
            "[1970-01-01 00:00:00] [app] INFO started",
            "[1970-01-01 00:00:01] [app] ERROR failed",
        ]

    def test_empty_export(self, tmp_path) -> None:
        """Test that exporting nothing still creates an empty file."""
        path = export_logs([], tmp_path, "none", datetime(2024, 1, 1))
        assert path.exists()
        assert path.read_text(encoding="utf-8") == ""
