"""In-memory loggers retaining the most recent records.

Purpose
-------
Capture dispatched lines without external targets so hosts and tests can
inspect exactly which ``(text, priority)`` pairs a stream produced.

Contents
--------
* :class:`SystemClock` – UTC :class:`ClockPort` implementation.
* :class:`MemoryLogger` – bounded :class:`LoggerPort` backed by a deque.
* :class:`MemoryLoggerRegistry` – :class:`LoggerRegistryPort` caching loggers by name.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from datetime import datetime, timezone
from typing import Deque, Iterator

from lib_log_stream.application.ports.logger import LoggerPort, LoggerRegistryPort
from lib_log_stream.application.ports.time import ClockPort
from lib_log_stream.domain.priority import Priority
from lib_log_stream.domain.records import LogRecord

LOGGER = logging.getLogger(__name__)


class SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class MemoryLogger(LoggerPort):
    """Retain delivered records, evicting the oldest beyond ``max_records``.

    Examples
    --------
    >>> logger = MemoryLogger("doc", max_records=2)
    >>> for text in ("a", "b", "c"):
    ...     logger.log(text, Priority.NOTICE)
    >>> logger.texts()
    ['b', 'c']
    """

    def __init__(self, name: str = "", *, max_records: int | None = None, clock: ClockPort | None = None) -> None:
        if max_records is not None and max_records <= 0:
            raise ValueError("max_records must be positive")
        self.name = name
        self._clock = clock or SystemClock()
        self._records: Deque[LogRecord] = deque(maxlen=max_records)
        self._lock = threading.Lock()

    @property
    def max_records(self) -> int | None:
        """Return the retention bound, ``None`` when unbounded."""

        return self._records.maxlen

    def log(self, text: str, priority: Priority) -> None:
        """Retain ``text``; text a record cannot hold is reported and dropped."""
        try:
            record = LogRecord(text=text, priority=priority, logger_name=self.name, timestamp=self._clock.now())
        except ValueError as exc:
            LOGGER.error("Dropped record for logger %r", self.name, exc_info=exc)
            return
        with self._lock:
            self._records.append(record)

    def records(self) -> list[LogRecord]:
        """Return a copy of the retained records, oldest first."""
        with self._lock:
            return list(self._records)

    def texts(self) -> list[str]:
        """Return only the texts of the retained records."""
        return [record.text for record in self.records()]

    def pairs(self) -> list[tuple[Priority, str]]:
        """Return ``(priority, text)`` tuples in delivery order."""
        return [(record.priority, record.text) for record in self.records()]

    def clear(self) -> None:
        """Forget all retained records."""
        with self._lock:
            self._records.clear()

    def __iter__(self) -> Iterator[LogRecord]:
        return iter(self.records())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


class MemoryLoggerRegistry(LoggerRegistryPort):
    """Create :class:`MemoryLogger` instances on first lookup and reuse them."""

    def __init__(self, *, max_records: int | None = None, clock: ClockPort | None = None) -> None:
        self._max_records = max_records
        self._clock = clock
        self._loggers: dict[str, MemoryLogger] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> MemoryLogger:
        with self._lock:
            logger = self._loggers.get(name)
            if logger is None:
                logger = MemoryLogger(name, max_records=self._max_records, clock=self._clock)
                self._loggers[name] = logger
            return logger

    def names(self) -> list[str]:
        """Return the registered logger names in creation order."""
        with self._lock:
            return list(self._loggers)


__all__ = ["MemoryLogger", "MemoryLoggerRegistry", "SystemClock"]
