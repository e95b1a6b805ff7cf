"""Core patterns module.

Provides reusable design patterns for the logging facility.
"""

from .singleton import ThreadSafeSingleton

__all__ = ["ThreadSafeSingleton"]
