"""
Custom exceptions for the logging facility.
"""

from typing import Optional, Dict, Any


class SingleLogError(Exception):
    """Base exception for logging facility errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InitializationError(SingleLogError):
    """
    Raised when the shared logger cannot be constructed.

    Surfaced synchronously to the caller that triggered construction, and
    re-raised to every later caller of the accessor.
    """

    def __init__(self, sink: str, reason: str):
        self.sink = sink
        self.reason = reason
        super().__init__(
            message=f"Cannot initialize log sink {sink}: {reason}",
            details={"sink": sink, "reason": reason},
        )


class PersistenceError(SingleLogError):
    """
    Raised when a single entry could not be written to the sink.

    Handled by the background worker; never reaches the logging caller.
    """

    def __init__(self, sink: str, entry: str, reason: str):
        self.sink = sink
        self.entry = entry
        self.reason = reason
        super().__init__(
            message=f"Failed to write log entry to {sink}: {reason}",
            details={"sink": sink, "entry": entry, "reason": reason},
        )


__all__ = [
    "SingleLogError",
    "InitializationError",
    "PersistenceError",
]
