"""Tests for LogEntry."""

from __future__ import annotations

import pytest

from ecsvoyager.constants.enums import LogLevel
from ecsvoyager.models.logs.log_entry import LogEntry


class TestLogEntryLevel:
    """Tests for level inference."""

    @pytest.mark.parametrize(
        ("message", "level"),
        [
            ("ERROR connection refused", LogLevel.ERROR),
            ("[warn] disk 80% full", LogLevel.WARN),
            ("Warning: deprecated flag", LogLevel.WARN),
            ("level=info msg=ready", LogLevel.INFO),
            ("DEBUG cache miss", LogLevel.DEBUG),
        ],
    )
    def test_level_detected(self, message: str, level: LogLevel) -> None:
        """Test that level tokens are detected case-insensitively."""
        assert LogEntry(timestamp=0, message=message).level is level

    def test_no_level(self) -> None:
        """Test that messages without a token have no level."""
        assert LogEntry(timestamp=0, message="GET /health 200").level is None

    def test_token_must_be_a_word(self) -> None:
        """Test that level names inside words are ignored."""
        assert LogEntry(timestamp=0, message="information only").level is None


class TestLogEntryFormatting:
    """Tests for rendering."""

    def test_formatted_timestamp_is_utc(self) -> None:
        """Test that millisecond timestamps render in UTC."""
        entry = LogEntry(timestamp=1700000000000, message="x")
        assert entry.formatted_timestamp == "2023-11-14 22:13:20"

    def test_to_line(self) -> None:
        """Test the exported line format."""
        entry = LogEntry(timestamp=0, message="INFO up", source="app")
        assert entry.to_line() == "[1970-01-01 00:00:00] [app] INFO up"
