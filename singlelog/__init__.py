"""
singlelog: a process-wide, thread-safe, asynchronous file logger.

Usage:
    from singlelog import get_logger

    logger = get_logger()
    logger.log("Application started")
    logger.log_error("Something went wrong")
"""

from .config import (
    LoggerConfig,
    get_logger_config,
    reset_logger_config,
    set_logger_config,
)
from .exceptions import SingleLogError, InitializationError, PersistenceError
from .pipeline import (
    AppLogger,
    FileSink,
    LogEntry,
    LoggerInterface,
    LogLevel,
    LogPipeline,
    LogSink,
    StreamSink,
    get_logger,
)

__version__ = "1.0.0"

__all__ = [
    "AppLogger",
    "get_logger",
    "LoggerInterface",
    "LogPipeline",
    "LogEntry",
    "LogLevel",
    "LogSink",
    "FileSink",
    "StreamSink",
    "LoggerConfig",
    "get_logger_config",
    "reset_logger_config",
    "set_logger_config",
    "SingleLogError",
    "InitializationError",
    "PersistenceError",
]
