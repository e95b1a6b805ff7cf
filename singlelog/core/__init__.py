"""Core building blocks: singleton base and background queues."""
