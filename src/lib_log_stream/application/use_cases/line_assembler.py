"""Use case turning a character stream into logger records.

Purpose
-------
Accumulate characters into a message buffer and hand every completed line to
the logger port at the current priority.

Contents
--------
* :data:`TERMINATORS` – characters that end a line.
* :class:`LineAssembler` – the :class:`UnbufferedSinkPort` implementation
  behind :class:`lib_log_stream.LogStream`.

System Role
-----------
Pure state management between the generic text stream adapter and the logger
port. It performs no I/O of its own besides the single ``log`` call per line.

Dispatch Rules
--------------
* ``\\n`` and ``\\r`` both terminate a line and are consumed.
* A terminator on an empty buffer dispatches an empty record.
* ``\\r\\n`` is not folded: it yields the line followed by an empty record.
* Unterminated content is never dispatched implicitly; :meth:`LineAssembler.discard`
  drops it.
"""

from __future__ import annotations

import logging

from lib_log_stream.application.ports.logger import LoggerPort
from lib_log_stream.application.ports.sink import UnbufferedSinkPort
from lib_log_stream.domain.message_buffer import MessageBuffer
from lib_log_stream.domain.priority import Priority

TERMINATORS = frozenset("\n\r")

LOGGER = logging.getLogger(__name__)


class LineAssembler(UnbufferedSinkPort):
    """Buffer characters and dispatch each completed line to a logger.

    Examples
    --------
    >>> class Recorder:
    ...     name = "doc"
    ...     def __init__(self):
    ...         self.records = []
    ...     def log(self, text, priority):
    ...         self.records.append((priority.name, text))
    >>> recorder = Recorder()
    >>> assembler = LineAssembler(recorder)
    >>> for char in "hi\\r\\n":
    ...     assert assembler.write_one(char)
    >>> recorder.records
    [('INFORMATION', 'hi'), ('INFORMATION', '')]
    """

    def __init__(
        self,
        logger: LoggerPort,
        priority: Priority = Priority.INFORMATION,
        capacity: int = 0,
    ) -> None:
        """Bind the assembler to ``logger`` with an initial priority and capacity hint.

        Parameters
        ----------
        logger:
            Non-owning reference to the logger receiving records; it must
            outlive the assembler.
        priority:
            Priority attached to records until changed via :meth:`set_priority`.
        capacity:
            Number of characters to reserve for the pending message. Purely a
            hint; lines of any length are accepted.
        """
        self._logger = logger
        self._priority = priority
        self._buffer = MessageBuffer(capacity)

    def get_logger(self) -> LoggerPort:
        """Return the logger receiving dispatched records."""
        return self._logger

    @property
    def pending(self) -> str:
        """Return the unterminated text waiting for a line terminator."""

        return self._buffer.text()

    def write_one(self, char: str) -> bool:
        """Consume one character, dispatching the buffer on a line terminator.

        Returns
        -------
        bool
            ``True`` unless growing the buffer raised :class:`MemoryError`; the
            buffer keeps everything appended before the failure.

        Raises
        ------
        ValueError
            When ``char`` is not exactly one character.
        """
        if len(char) != 1:
            raise ValueError(f"write_one expects a single character, got {char!r}")
        if char in TERMINATORS:
            self._dispatch()
            return True
        try:
            self._buffer.append(char)
        except MemoryError:
            LOGGER.warning(
                "Message buffer for logger %r could not grow beyond %d characters",
                getattr(self._logger, "name", None),
                len(self._buffer),
            )
            return False
        return True

    def set_priority(self, priority: Priority) -> None:
        """Tag records dispatched from now on with ``priority``."""
        self._priority = priority

    def get_priority(self) -> Priority:
        """Return the priority the next dispatched record will carry."""
        return self._priority

    def capacity(self) -> int:
        """Return the reserved capacity of the message buffer."""
        return self._buffer.capacity

    def reserve(self, capacity: int) -> None:
        """Reserve room for ``capacity`` characters; no effect on dispatch."""
        self._buffer.reserve(capacity)

    def discard(self) -> int:
        """Drop the unterminated line without dispatching it.

        Returns the number of characters dropped.
        """
        dropped = len(self._buffer)
        self._buffer.clear()
        return dropped

    def _dispatch(self) -> None:
        """Hand the buffered line to the logger and reset the buffer."""
        text = self._buffer.text()
        self._buffer.clear()
        self._logger.log(text, self._priority)


__all__ = ["LineAssembler", "TERMINATORS"]
