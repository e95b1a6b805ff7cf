"""
Process-wide logger singleton.

The first call to `get_logger()`, from any thread, prepares the sink and
starts the pipeline worker exactly once. Every other call returns the same
fully constructed instance.
"""

import atexit
import logging
from typing import Optional

from ..config import get_logger_config
from ..core.patterns import ThreadSafeSingleton
from ..exceptions import InitializationError
from .log_pipeline import LoggerInterface, LogPipeline

logger = logging.getLogger(__name__)


class AppLogger(ThreadSafeSingleton, LoggerInterface):
    """
    Shared logger handle backed by a single `LogPipeline`.

    Construction reads `LoggerConfig` from the environment. If the sink
    cannot be prepared, `InitializationError` is raised to the first caller
    and re-raised to every later caller; no worker is started.
    """

    def _initialize(self) -> None:
        try:
            self.config = get_logger_config()
        except ValueError as e:
            raise InitializationError("<config>", str(e)) from e
        self.pipeline = LogPipeline.from_config(self.config)
        self.pipeline.open()

        # Drain pending entries on interpreter shutdown
        atexit.register(self.shutdown)
        logger.info(f"Logger initialized. Log file: {self.log_file_path}")

    def log(self, message: str) -> None:
        self.pipeline.log(message)

    def log_error(self, message: str) -> None:
        self.pipeline.log_error(message)

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Wait until every entry logged so far has been handled."""
        return self.pipeline.flush(timeout)

    def shutdown(self, wait: bool = True, timeout: Optional[float] = None) -> None:
        """Drain pending entries and stop the worker."""
        if timeout is None:
            timeout = self.config.shutdown_timeout_seconds
        self.pipeline.shutdown(wait=wait, timeout=timeout)

    def _cleanup(self) -> None:
        atexit.unregister(self.shutdown)
        self.shutdown()

    @property
    def log_file_path(self) -> str:
        return self.pipeline.sink.description

    @property
    def is_running(self) -> bool:
        return self.pipeline.is_running


# Singleton accessor
def get_logger() -> AppLogger:
    """Get singleton logger instance."""
    return AppLogger.get_instance()
