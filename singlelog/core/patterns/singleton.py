"""Thread-safe singleton pattern implementation.

This module provides a reusable base class for implementing the singleton
pattern. Construction runs exactly once under a per-class lock and the
instance is published only after `_initialize()` has returned, so no caller
can ever observe a partially initialized object.
"""

import logging
import threading
from abc import ABC
from typing import ClassVar, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T', bound='ThreadSafeSingleton')


class ThreadSafeSingleton(ABC):
    """Abstract base class for thread-safe singletons.

    Usage:
        class MySingleton(ThreadSafeSingleton):
            def _initialize(self):
                # One-time initialization logic
                self.some_resource = create_resource()

            def do_something(self):
                return self.some_resource.process()

        # Get instance (creates on first call)
        instance = MySingleton.get_instance()

    If `_initialize()` raises, nothing is published and the exception is
    recorded: every later access re-raises the same exception instead of
    attempting a second construction. `reset_instance()` clears both the
    instance and the recorded failure.

    Note:
        Subclasses should implement `_initialize()` for one-time setup.
        Do NOT override `__new__` or `__init__` in subclasses.
    """

    _instance: ClassVar[Optional['ThreadSafeSingleton']] = None
    _init_error: ClassVar[Optional[BaseException]] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        # Each concrete singleton gets its own slot and lock
        cls._instance = None
        cls._init_error = None
        cls._lock = threading.Lock()

    def __new__(cls: type[T]) -> T:
        """Return the singleton, constructing it on first access."""
        instance = cls._instance
        if instance is not None:
            return instance  # type: ignore

        with cls._lock:
            if cls._instance is None:
                if cls._init_error is not None:
                    raise cls._init_error

                candidate = super().__new__(cls)
                try:
                    candidate._initialize()
                except Exception as e:
                    cls._init_error = e
                    logger.error(f"{cls.__name__} initialization failed: {e}")
                    raise
                cls._instance = candidate
            return cls._instance  # type: ignore

    def _initialize(self) -> None:
        """Override in subclasses for one-time initialization.

        This method is called exactly once, before the instance becomes
        visible to any caller. Use this instead of __init__ for
        initialization logic.
        """
        pass

    @classmethod
    def get_instance(cls: type[T]) -> T:
        """Get the singleton instance.

        This is the preferred way to access the singleton.

        Returns:
            The singleton instance.
        """
        return cls()

    @classmethod
    def is_initialized(cls) -> bool:
        """Check whether the singleton has been constructed."""
        return cls._instance is not None

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (primarily for testing).

        Warning:
            This should only be used in tests. Using this in production
            code may lead to resource leaks or inconsistent state.
        """
        with cls._lock:
            instance = cls._instance
            cls._instance = None
            cls._init_error = None

        if instance is not None:
            try:
                instance._cleanup()
            except Exception as e:
                logger.warning(f"Error during {cls.__name__} cleanup: {e}")

    def _cleanup(self) -> None:
        """Override in subclasses for cleanup logic.

        Called when reset_instance() is invoked. Use this to release
        resources, stop worker threads, etc.
        """
        pass
