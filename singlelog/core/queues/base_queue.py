"""Background queue base class with a dedicated worker thread.

Provides common infrastructure for producer/consumer queues drained by a
single background thread.
"""

import logging
import queue
import threading
from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

# Event type parameter
T = TypeVar('T')


class QueueState(str, Enum):
    """Lifecycle states of the background worker."""

    CREATED = "created"
    IDLE = "idle"
    DRAINING = "draining"
    STOPPING = "stopping"
    STOPPED = "stopped"


class BackgroundQueue(Generic[T], ABC):
    """
    Abstract base class for background queue processing.

    Provides common infrastructure for:
    - Unbounded FIFO queue shared by any number of producer threads
    - A single consumer thread that blocks while the queue is empty
    - Graceful drain-and-stop shutdown

    Subclasses must implement:
    - `_process_event(event)`: Process a single event

    Example:
        class MyQueue(BackgroundQueue[MyEvent]):
            def _process_event(self, event: MyEvent) -> None:
                some_service.handle(event)

        # Usage
        q = MyQueue(name="my-queue")
        q.start()
        q.enqueue(MyEvent(...))
        q.shutdown()
    """

    def __init__(self, name: str = "background-queue") -> None:
        self._name = name
        # None is the shutdown sentinel
        self._queue: queue.Queue[Optional[T]] = queue.Queue()
        self._thread: Optional[threading.Thread] = None
        self._lifecycle_lock = threading.Lock()
        self._accepting = True
        self._state = QueueState.CREATED
        # Events enqueued but not yet handled by the worker
        self._pending = 0
        self._pending_cond = threading.Condition()

    @abstractmethod
    def _process_event(self, event: T) -> None:
        """Process a single event from the queue.

        Args:
            event: The event to process

        Raises:
            Any exception - will be passed to `_on_process_error`
        """
        pass

    def _on_process_error(self, event: T, error: Exception) -> None:
        """Report an event that could not be processed.

        The worker keeps running after this returns.
        """
        logger.warning(f"Failed to process {self._name} event: {error}")

    def _on_rejected(self, event: T) -> None:
        """Report an event dropped because the queue is shut down."""
        logger.warning(f"{self._name} is shut down, dropping event")

    def start(self) -> None:
        """Start the background processing thread."""
        with self._lifecycle_lock:
            if self._thread is not None:
                return

            self._thread = threading.Thread(
                target=self._run_loop,
                name=self._name,
                daemon=True,
            )
            self._state = QueueState.IDLE
            self._thread.start()
        logger.info(f"{self._name} started")

    def _run_loop(self) -> None:
        """Consume events until the shutdown sentinel is reached."""
        try:
            while True:
                event = self._queue.get()
                if event is None:
                    self._drain_remaining()
                    break
                self._transition(QueueState.DRAINING)
                self._handle(event)
                if self._queue.empty():
                    self._transition(QueueState.IDLE)
        except Exception as e:
            logger.error(f"{self._name} loop error: {e}")
        finally:
            self._state = QueueState.STOPPED
            logger.info(f"{self._name} loop stopped")

    def _transition(self, state: QueueState) -> None:
        """Move between IDLE and DRAINING unless shutdown has begun."""
        with self._lifecycle_lock:
            if self._accepting:
                self._state = state

    def _drain_remaining(self) -> None:
        """Process events that were enqueued alongside the sentinel."""
        while True:
            try:
                event = self._queue.get_nowait()
            except queue.Empty:
                return
            if event is not None:
                self._handle(event)

    def _handle(self, event: T) -> None:
        try:
            self._process_event(event)
        except Exception as e:
            self._on_process_error(event, e)
        finally:
            with self._pending_cond:
                self._pending -= 1
                if self._pending == 0:
                    self._pending_cond.notify_all()

    def enqueue(self, event: T) -> bool:
        """Add event to queue (non-blocking).

        Args:
            event: The event to enqueue

        Returns:
            True if the event was accepted, False if the queue is shut down.
        """
        if not self._accepting:
            self._on_rejected(event)
            return False

        if self._thread is None:
            self.start()

        with self._pending_cond:
            self._pending += 1
        self._queue.put_nowait(event)
        return True

    def wait_until_drained(self, timeout: Optional[float] = None) -> bool:
        """Block until every event enqueued so far has been processed.

        Args:
            timeout: Maximum seconds to wait, or None to wait indefinitely

        Returns:
            True if the queue drained, False if the timeout elapsed first.
        """
        with self._pending_cond:
            return self._pending_cond.wait_for(lambda: self._pending == 0, timeout=timeout)

    def shutdown(self, wait: bool = True, timeout: float = 5.0) -> None:
        """Stop accepting events, drain what remains and stop the worker.

        Args:
            wait: If True, wait for thread to finish
            timeout: Maximum seconds to wait for shutdown
        """
        with self._lifecycle_lock:
            first_call = self._accepting
            self._accepting = False
            thread = self._thread
            if thread is None:
                self._state = QueueState.STOPPED
                return
            if first_call:
                logger.info(f"Shutting down {self._name}...")
                self._state = QueueState.STOPPING
                self._queue.put_nowait(None)

        if not wait or not thread.is_alive():
            return

        thread.join(timeout=timeout)
        if thread.is_alive():
            logger.warning(
                f"{self._name} did not stop within {timeout}s, "
                f"{self.queue_size} events still pending"
            )
        elif first_call:
            logger.info(f"{self._name} shutdown complete")

    @property
    def name(self) -> str:
        """Queue name, also used as the worker thread name."""
        return self._name

    @property
    def state(self) -> QueueState:
        """Current worker state."""
        return self._state

    @property
    def queue_size(self) -> int:
        """Get current queue size."""
        return self._queue.qsize()

    @property
    def pending_count(self) -> int:
        """Events enqueued but not yet handled."""
        return self._pending

    @property
    def is_running(self) -> bool:
        """Check if the worker thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    @property
    def is_accepting(self) -> bool:
        """Check if new events are still accepted."""
        return self._accepting
