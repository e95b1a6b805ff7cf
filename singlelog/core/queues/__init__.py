"""Core queues module.

Provides base classes for background queue processing.
"""

from .base_queue import BackgroundQueue, QueueState

__all__ = ["BackgroundQueue", "QueueState"]
