"""Durable sinks written by the pipeline worker."""

import codecs
import os
import logging
from abc import ABC, abstractmethod
from typing import List, TextIO

from ..exceptions import InitializationError

logger = logging.getLogger(__name__)


class LogSink(ABC):
    """Abstract sink interface.

    Only the pipeline worker thread calls `write`, so implementations need
    no locking of their own.
    """

    @abstractmethod
    def open(self) -> None:
        """
        Prepare the sink for writing.

        Raises:
            InitializationError: If the sink cannot be written to
        """
        pass

    @abstractmethod
    def write(self, line: str) -> None:
        """
        Append one rendered entry followed by a line terminator.

        Args:
            line: Rendered entry without terminator

        Raises:
            OSError: If the write fails
        """
        pass

    def close(self) -> None:
        """Release resources held by the sink."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human readable location of the sink, used in diagnostics."""
        pass


class FileSink(LogSink):
    """
    Append-only text file.

    The file is opened and closed for every entry, so a file that is moved,
    deleted or made read-only while the process runs is picked up again on
    the next write.
    """

    def __init__(self, path: str, encoding: str = "utf-8"):
        self.path = os.path.abspath(path)
        self.encoding = encoding

    def open(self) -> None:
        """Create the file and any missing parent directories.

        Nothing is left on disk when preparation fails.
        """
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise InitializationError(self.path, str(e)) from e

        created = []
        try:
            created = self._make_parents()
            # Append mode never truncates an existing log
            with open(self.path, "a", encoding=self.encoding):
                pass
        except OSError as e:
            self._remove_dirs(created)
            raise InitializationError(self.path, str(e)) from e
        logger.debug(f"File sink ready: {self.path}")

    def _make_parents(self) -> List[str]:
        """Create missing ancestors of the log file, outermost first."""
        missing = []
        directory = os.path.dirname(self.path)
        while directory and not os.path.isdir(directory):
            missing.append(directory)
            parent = os.path.dirname(directory)
            if parent == directory:
                break
            directory = parent

        created = []
        try:
            for directory in reversed(missing):
                os.mkdir(directory)
                created.append(directory)
        except OSError:
            self._remove_dirs(created)
            raise
        return created

    @staticmethod
    def _remove_dirs(created: List[str]) -> None:
        for directory in reversed(created):
            try:
                os.rmdir(directory)
            except OSError as e:
                logger.warning(f"Could not remove {directory}: {e}")

    def write(self, line: str) -> None:
        # Text mode translates "\n" to the platform line terminator
        with open(self.path, "a", encoding=self.encoding) as f:
            f.write(line + "\n")

    @property
    def description(self) -> str:
        return self.path


class StreamSink(LogSink):
    """Writable text stream such as an open file or io.StringIO."""

    def __init__(self, stream: TextIO, name: str = "<stream>"):
        self.stream = stream
        self.name = name

    def open(self) -> None:
        if getattr(self.stream, "closed", False):
            raise InitializationError(self.name, "stream is closed")
        writable = getattr(self.stream, "writable", None)
        if writable is not None and not writable():
            raise InitializationError(self.name, "stream is not writable")

    def write(self, line: str) -> None:
        self.stream.write(line + "\n")
        self.stream.flush()

    @property
    def description(self) -> str:
        return self.name
