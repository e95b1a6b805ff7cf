"""Log entry model."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(str, Enum):
    """Severity of a log entry."""

    INFO = "INFO"
    ERROR = "ERROR"


@dataclass(frozen=True)
class LogEntry:
    """Immutable log entry, consumed exactly once by the pipeline worker."""

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=datetime.now)

    def render(self) -> str:
        """Format as `[LEVEL] yyyy-MM-dd HH:mm:ss - message` (no terminator)."""
        return f"[{self.level.value}] {self.timestamp.strftime(TIMESTAMP_FORMAT)} - {self.message}"
