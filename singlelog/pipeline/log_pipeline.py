"""
Asynchronous log pipeline.

Callers format an entry, enqueue it and return. A single background worker
appends entries to the sink in FIFO order. Write failures are reported on
the `singlelog.diagnostics` logger and never reach the caller.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)

from ..config import LoggerConfig
from ..core.queues import BackgroundQueue
from ..exceptions import PersistenceError
from .entry import LogEntry, LogLevel
from .sink import FileSink, LogSink

logger = logging.getLogger(__name__)

# Secondary channel for failures the logging caller never sees
diagnostics = logging.getLogger("singlelog.diagnostics")


class LoggerInterface(ABC):
    """Logging contract consumed by business collaborators."""

    @abstractmethod
    def log(self, message: str) -> None:
        """Record an informational message (fire-and-forget)."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Record an error message (fire-and-forget)."""
        pass


class LogPipeline(BackgroundQueue[LogEntry], LoggerInterface):
    """
    Producer/consumer pipeline from logging callers to a durable sink.

    Any number of threads may call `log` / `log_error` concurrently; the
    queue is the only shared mutable state. The sink is written only by the
    worker thread.
    """

    def __init__(
        self,
        sink: LogSink,
        name: str = "log-pipeline",
        echo_to_console: bool = False,
        write_retries: int = 0,
        retry_wait_seconds: float = 0.1,
    ):
        """
        Initialize the pipeline. Call `open()` to prepare the sink and start
        the worker.

        Args:
            sink: Destination for rendered entries
            name: Worker thread name
            echo_to_console: Print each rendered entry when it is logged
            write_retries: Extra attempts for a failed write
            retry_wait_seconds: Initial backoff between write attempts
        """
        super().__init__(name=name)
        self.sink = sink
        self.echo_to_console = echo_to_console
        self.write_retries = write_retries
        self.retry_wait_seconds = retry_wait_seconds
        self._write = self._build_writer()

    @classmethod
    def from_config(
        cls, config: LoggerConfig, sink: Optional[LogSink] = None
    ) -> "LogPipeline":
        """Build a pipeline from configuration, defaulting to a file sink."""
        if sink is None:
            sink = FileSink(config.log_file_path, encoding=config.encoding)
        return cls(
            sink=sink,
            name=config.queue_name,
            echo_to_console=config.echo_to_console,
            write_retries=config.write_retries,
            retry_wait_seconds=config.retry_wait_seconds,
        )

    def _build_writer(self) -> Callable[[str], None]:
        if self.write_retries <= 0:
            return self.sink.write
        return retry(
            stop=stop_after_attempt(self.write_retries + 1),
            wait=wait_exponential(multiplier=self.retry_wait_seconds, max=10),
            retry=retry_if_exception_type(OSError),
            before_sleep=before_sleep_log(diagnostics, logging.WARNING),
            reraise=True,
        )(self.sink.write)

    def open(self) -> None:
        """
        Prepare the sink, then start the worker.

        Raises:
            InitializationError: If the sink cannot be prepared. The worker
                is not started in that case.
        """
        self.sink.open()
        self.start()
        logger.info(f"Log pipeline writing to {self.sink.description}")

    def log(self, message: str) -> None:
        self._submit(LogLevel.INFO, message)

    def log_error(self, message: str) -> None:
        self._submit(LogLevel.ERROR, message)

    def _submit(self, level: LogLevel, message: str) -> None:
        entry = LogEntry(level=level, message=str(message))
        if self.echo_to_console:
            print(entry.render())
        self.enqueue(entry)

    def _process_event(self, event: LogEntry) -> None:
        """Append one entry to the sink."""
        line = event.render()
        try:
            self._write(line)
        except Exception as e:
            raise PersistenceError(self.sink.description, line, str(e)) from e

    def _on_process_error(self, event: LogEntry, error: Exception) -> None:
        # The entry is dropped; following entries keep their order
        diagnostics.error(str(error))

    def _on_rejected(self, event: LogEntry) -> None:
        diagnostics.warning(f"{self.name} is shut down, dropping entry: {event.render()}")

    def flush(self, timeout: Optional[float] = None) -> bool:
        """
        Wait until every entry logged so far has been handled.

        Returns:
            True if the queue drained before the timeout.
        """
        return self.wait_until_drained(timeout)

    def shutdown(self, wait: bool = True, timeout: float = 5.0) -> None:
        """Stop accepting entries, drain pending ones and stop the worker."""
        super().shutdown(wait=wait, timeout=timeout)
        if not self.is_running:
            self.sink.close()
