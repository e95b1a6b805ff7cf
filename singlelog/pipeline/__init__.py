"""Log pipeline: entries, sinks, the background writer and the shared logger."""

from .entry import LogEntry, LogLevel
from .sink import LogSink, FileSink, StreamSink
from .log_pipeline import LoggerInterface, LogPipeline
from .app_logger import AppLogger, get_logger

__all__ = [
    # Entries
    "LogEntry",
    "LogLevel",
    # Sinks
    "LogSink",
    "FileSink",
    "StreamSink",
    # Pipeline
    "LoggerInterface",
    "LogPipeline",
    # Singleton accessor
    "AppLogger",
    "get_logger",
]
