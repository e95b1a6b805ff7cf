"""Shared test fixtures and configuration."""

import io
import sys
import time
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from singlelog.pipeline.sink import LogSink  # noqa: E402


# =============================================================================
# Environment Variable Fixtures
# =============================================================================

SINGLELOG_ENV_VARS = (
    "SINGLELOG_FILE",
    "SINGLELOG_ENCODING",
    "SINGLELOG_ECHO",
    "SINGLELOG_WRITE_RETRIES",
    "SINGLELOG_RETRY_WAIT",
    "SINGLELOG_SHUTDOWN_TIMEOUT",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Clear logger environment variables."""
    for name in SINGLELOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def log_file(tmp_path, monkeypatch, clean_env):
    """Point the shared logger at a temporary log file."""
    path = tmp_path / "logs" / "app.log"
    monkeypatch.setenv("SINGLELOG_FILE", str(path))
    return path


@pytest.fixture
def unusable_log_path(tmp_path, monkeypatch, clean_env):
    """A log path whose parent is a regular file, so it can never be created."""
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("occupied")
    path = blocker / "app.log"
    monkeypatch.setenv("SINGLELOG_FILE", str(path))
    return path


# =============================================================================
# Singleton Reset
# =============================================================================

@pytest.fixture(autouse=True)
def reset_logger_singleton():
    """Reset the shared logger and cached config before and after each test."""
    from singlelog.config import reset_logger_config
    from singlelog.pipeline.app_logger import AppLogger

    AppLogger.reset_instance()
    reset_logger_config()

    yield

    AppLogger.reset_instance()
    reset_logger_config()


# =============================================================================
# Sink Fixtures
# =============================================================================

class RecordingSink(LogSink):
    """In-memory sink that can be switched into a failing state."""

    def __init__(self):
        self.lines = []
        self.failing = False
        self.attempts = 0
        self.write_delay = 0.0
        self.closed = False

    def open(self):
        pass

    def write(self, line):
        self.attempts += 1
        if self.write_delay:
            time.sleep(self.write_delay)
        if self.failing:
            raise PermissionError(13, "Permission denied", "memory://log")
        self.lines.append(line)

    def close(self):
        self.closed = True

    @property
    def description(self):
        return "memory://log"


@pytest.fixture
def recording_sink():
    """Create an in-memory sink."""
    return RecordingSink()


@pytest.fixture
def string_stream():
    """A writable in-memory text stream."""
    return io.StringIO()
