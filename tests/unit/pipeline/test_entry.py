"""Unit tests for LogEntry."""

import dataclasses
from datetime import datetime

import pytest

from singlelog.pipeline.entry import LogEntry, LogLevel


class TestLogEntry:
    """Tests for LogEntry dataclass."""

    def test_render_info(self):
        """Test rendering an informational entry."""
        entry = LogEntry(
            level=LogLevel.INFO,
            message="Application started",
            timestamp=datetime(2024, 1, 2, 3, 4, 5),
        )

        assert entry.render() == "[INFO] 2024-01-02 03:04:05 - Application started"

    def test_render_error(self):
        """Test rendering an error entry."""
        entry = LogEntry(
            level=LogLevel.ERROR,
            message="Simulated error occurred",
            timestamp=datetime(2024, 12, 31, 23, 59, 59),
        )

        assert entry.render() == "[ERROR] 2024-12-31 23:59:59 - Simulated error occurred"

    def test_render_drops_microseconds(self):
        """Test that timestamps are rendered to the second."""
        entry = LogEntry(
            level=LogLevel.INFO,
            message="msg",
            timestamp=datetime(2024, 1, 1, 0, 0, 0, 999999),
        )

        assert entry.render() == "[INFO] 2024-01-01 00:00:00 - msg"

    def test_timestamp_defaults_to_now(self):
        """Test that the timestamp is stamped at creation."""
        before = datetime.now().replace(microsecond=0)
        entry = LogEntry(level=LogLevel.INFO, message="now")
        after = datetime.now()

        assert before <= entry.timestamp <= after

    def test_entry_is_immutable(self):
        """Test that an entry cannot be modified after creation."""
        entry = LogEntry(level=LogLevel.INFO, message="fixed")

        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.message = "changed"

    def test_unicode_message(self):
        """Test that non-ASCII messages are rendered unchanged."""
        entry = LogEntry(
            level=LogLevel.INFO,
            message="Bestellung für Müller, 注文",
            timestamp=datetime(2024, 1, 1),
        )

        assert entry.render().endswith(" - Bestellung für Müller, 注文")


class TestLogLevel:
    """Tests for LogLevel enum."""

    def test_values(self):
        """Test the two supported severities."""
        assert LogLevel.INFO.value == "INFO"
        assert LogLevel.ERROR.value == "ERROR"
        assert len(list(LogLevel)) == 2
