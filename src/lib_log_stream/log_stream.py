"""Log stream façade: a writable text stream that logs one record per line.

Purpose
-------
Expose the ergonomic surface host code uses: write text with ``print``,
``write`` or ``<<`` chains and switch the priority fluently, while every
completed line is handed to a logger as one record.

Contents
--------
* :data:`DEFAULT_BUFFER_CAPACITY` – default capacity hint (255 characters).
* :class:`LogStream` – the façade with the eight severity operations.
* :func:`summary_info` – metadata banner shared by the CLI.

System Role
-----------
Outer shell over :class:`LineAssembler` and :class:`UnbufferedTextStream`.
The logger is injected (or resolved by name through an injected registry), so
routing, filtering and sinks stay outside this package's core.

Usage
-----
>>> from lib_log_stream.adapters.memory import MemoryLogger
>>> logger = MemoryLogger("app")
>>> stream = LogStream(logger)
>>> stream << "Some informational message" << "\\n"  # doctest: +ELLIPSIS
<LogStream logger='app' priority=INFORMATION pending=0>
>>> _ = stream.error() << "Some error message: " << 42 << "\\n"
>>> print("printed", "too", file=stream.warning())
>>> [(priority.name, text) for priority, text in logger.pairs()]
[('INFORMATION', 'Some informational message'), ('ERROR', 'Some error message: 42'), ('WARNING', 'printed too')]
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from . import __init__conf__
from .adapters.stdlib_logging import StdlibLoggerRegistry
from .adapters.unbuffered_stream import UnbufferedTextStream
from .application.ports.logger import LoggerPort, LoggerRegistryPort
from .application.use_cases.line_assembler import LineAssembler
from .domain.priority import Priority, PriorityLike

DEFAULT_BUFFER_CAPACITY = 255

LOGGER = logging.getLogger(__name__)


def _severity_switch(priority: Priority) -> Callable[..., "LogStream"]:
    """Build the named severity operation for ``priority``."""

    def switch(self: "LogStream", message: Optional[str] = None) -> "LogStream":
        return self.level(priority, message)

    switch.__name__ = priority.severity
    switch.__qualname__ = f"LogStream.{priority.severity}"
    switch.__doc__ = (
        f"Set the priority to ``{priority.name}`` and return the stream.\n\n"
        f"When ``message`` is given it is written followed by a line terminator,\n"
        f"so it is dispatched at ``{priority.name}`` before this call returns."
    )
    return switch


class LogStream(UnbufferedTextStream):
    """Writable text stream sending each completed line to a logger.

    Parameters
    ----------
    logger:
        A :class:`LoggerPort` or the name of one. Names are resolved with
        ``registry.get(name)``; unknown names follow the registry's policy.
    priority:
        Initial priority (default ``INFORMATION``); anything accepted by
        :meth:`Priority.coerce`.
    capacity:
        Initial message buffer capacity hint (default 255).
    registry:
        Registry for name lookups. Defaults to :class:`StdlibLoggerRegistry`.

    Notes
    -----
    ``\\n`` and ``\\r`` each end a line; ``\\r\\n`` therefore yields the line plus
    an empty record. Closing the stream (explicitly, by leaving a ``with``
    block or through garbage collection) discards an unterminated line, and
    :meth:`flush` never dispatches one.
    """

    def __init__(
        self,
        logger: LoggerPort | str,
        priority: PriorityLike = Priority.INFORMATION,
        capacity: int = DEFAULT_BUFFER_CAPACITY,
        *,
        registry: LoggerRegistryPort | None = None,
    ) -> None:
        if isinstance(logger, str):
            logger = (registry or StdlibLoggerRegistry()).get(logger)
        assembler = LineAssembler(logger, Priority.coerce(priority), capacity)
        super().__init__(assembler)
        self._assembler = assembler

    @property
    def assembler(self) -> LineAssembler:
        """Return the line assembler owned by this stream."""

        return self._assembler

    def get_logger(self) -> LoggerPort:
        """Return the logger receiving records."""
        return self._assembler.get_logger()

    def get_priority(self) -> Priority:
        """Return the priority the next dispatched record will carry."""
        return self._assembler.get_priority()

    def level(self, priority: PriorityLike, message: Optional[str] = None) -> "LogStream":
        """Switch to ``priority`` and optionally log ``message`` right away.

        Parameters
        ----------
        priority:
            New current priority; it also tags text already buffered because
            tagging happens when the terminator arrives.
        message:
            When given, written followed by ``"\\n"`` so the buffer is empty
            once this call returns.

        Returns
        -------
        LogStream
            ``self``, so insertions can be chained.
        """
        self._assembler.set_priority(Priority.coerce(priority))
        if message is not None:
            self.write(message)
            self.write("\n")
        return self

    def priority(self, priority: PriorityLike) -> "LogStream":
        """Set the priority for subsequent records and return the stream."""
        return self.level(priority)

    fatal = _severity_switch(Priority.FATAL)
    critical = _severity_switch(Priority.CRITICAL)
    error = _severity_switch(Priority.ERROR)
    warning = _severity_switch(Priority.WARNING)
    notice = _severity_switch(Priority.NOTICE)
    information = _severity_switch(Priority.INFORMATION)
    debug = _severity_switch(Priority.DEBUG)
    trace = _severity_switch(Priority.TRACE)

    def __lshift__(self, value: Any) -> "LogStream":
        """Write ``str(value)`` and return the stream for chaining."""
        self.write(value if isinstance(value, str) else str(value))
        return self

    def capacity(self) -> int:
        """Return the reserved capacity of the message buffer."""
        return self._assembler.capacity()

    def reserve(self, capacity: int) -> None:
        """Reserve message buffer room; purely advisory."""
        self._assembler.reserve(capacity)

    def close(self) -> None:
        """Close the stream, dropping any unterminated line."""
        assembler = getattr(self, "_assembler", None)
        if assembler is not None and not self.closed:
            dropped = assembler.discard()
            if dropped:
                LOGGER.debug("Discarded %d unterminated characters for logger %r", dropped, getattr(assembler.get_logger(), "name", None))
        super().close()

    def __repr__(self) -> str:
        name = getattr(self.get_logger(), "name", None)
        return f"<{type(self).__name__} logger={name!r} priority={self.get_priority().name} pending={len(self._assembler.pending)}>"


def summary_info() -> str:
    """Return the metadata banner printed by the ``info`` command.

    Examples
    --------
    >>> summary_info().splitlines()[0]
    'Info for lib_log_stream:'
    """
    lines = [f"Info for {__init__conf__.name}:", ""]
    fields = [
        ("name", __init__conf__.name),
        ("title", __init__conf__.title),
        ("version", __init__conf__.version),
        ("homepage", __init__conf__.homepage),
        ("author", __init__conf__.author),
        ("shell_command", __init__conf__.shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    return "\n".join(lines) + "\n"


__all__ = ["DEFAULT_BUFFER_CAPACITY", "LogStream", "summary_info"]
