"""Text stream that commits every character straight to a sink.

Purpose
-------
Give any :class:`UnbufferedSinkPort` the standard writable text-stream surface
(``write``, ``writelines``, ``print(..., file=...)``) without adding a buffer
of its own.

Contents
--------
* :class:`UnbufferedTextStream` – :class:`io.TextIOBase` subclass with a
  sticky error state.

System Role
-----------
Generic stream layer underneath :class:`lib_log_stream.LogStream`. Sink
failures surface here as an error state the caller can inspect and clear
instead of as exceptions, mirroring how classic output streams behave.
"""

from __future__ import annotations

import io
import logging

from lib_log_stream.application.ports.sink import UnbufferedSinkPort

LOGGER = logging.getLogger(__name__)


class UnbufferedTextStream(io.TextIOBase):
    """Route each written character through ``sink.write_one``.

    Once the sink rejects a character the stream enters the failed state:
    the remainder of that write is abandoned and later writes commit nothing
    until :meth:`clear_error` is called.

    Examples
    --------
    >>> class Collect:
    ...     def __init__(self):
    ...         self.chars = []
    ...     def write_one(self, char):
    ...         self.chars.append(char)
    ...         return True
    >>> sink = Collect()
    >>> stream = UnbufferedTextStream(sink)
    >>> stream.write("abc")
    3
    >>> "".join(sink.chars), stream.good()
    ('abc', True)
    """

    def __init__(self, sink: UnbufferedSinkPort) -> None:
        super().__init__()
        self._sink = sink
        self._failed = False

    @property
    def sink(self) -> UnbufferedSinkPort:
        """Return the sink receiving committed characters."""

        return self._sink

    @property
    def failed(self) -> bool:
        """Return ``True`` when a previous write could not be committed."""

        return self._failed

    def good(self) -> bool:
        """Return ``True`` while no write has failed since the last reset."""
        return not self._failed

    def clear_error(self) -> None:
        """Reset the error state so subsequent writes are attempted again."""
        self._failed = False

    def writable(self) -> bool:
        return True

    def write(self, s: str) -> int:
        """Commit ``s`` character by character and return the committed count.

        Raises
        ------
        TypeError
            When ``s`` is not a string.
        ValueError
            When the stream is closed.
        """
        if not isinstance(s, str):
            raise TypeError(f"write() argument must be str, not {type(s).__name__}")
        if self.closed:
            raise ValueError("I/O operation on closed stream.")
        if self._failed:
            return 0
        committed = 0
        for char in s:
            if not self._sink.write_one(char):
                self._failed = True
                LOGGER.debug("Sink rejected a character after %d of %d; stream marked failed", committed, len(s))
                return committed
            committed += 1
        return committed

    def flush(self) -> None:
        """Nothing is buffered at this layer; only the closed check applies."""
        if self.closed:
            raise ValueError("I/O operation on closed stream.")


__all__ = ["UnbufferedTextStream"]
