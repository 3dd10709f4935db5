"""Growable character buffer holding the pending, unterminated message.

Purpose
-------
Keep the characters of the line currently being assembled together with a
reserved-capacity figure that callers may size up front.

Contents
--------
* :class:`MessageBuffer` with append/clear/reserve helpers.

System Role
-----------
Owned by :class:`lib_log_stream.application.use_cases.line_assembler.LineAssembler`.
Capacity is advisory only; content is never bounded by it.
"""

from __future__ import annotations


class MessageBuffer:
    """Character buffer with an advisory reserved capacity.

    Examples
    --------
    >>> buffer = MessageBuffer(capacity=2)
    >>> for char in "abc":
    ...     buffer.append(char)
    >>> buffer.text(), buffer.capacity
    ('abc', 4)
    >>> buffer.clear()
    >>> len(buffer), buffer.capacity
    (0, 4)
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._chars: list[str] = []
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Return the number of characters the buffer holds without growing."""

        return self._capacity

    def append(self, char: str) -> None:
        """Append ``char``, doubling the reserved capacity when it is exhausted."""
        if len(self._chars) >= self._capacity:
            self._capacity = max(self._capacity * 2, len(self._chars) + 1)
        self._chars.append(char)

    def clear(self) -> None:
        """Drop the content while keeping the reserved capacity."""
        self._chars.clear()

    def reserve(self, capacity: int) -> None:
        """Grow the reserved capacity to at least ``capacity``; never shrinks."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = max(self._capacity, capacity, len(self._chars))

    def text(self) -> str:
        """Return the buffered characters as one string."""
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)


__all__ = ["MessageBuffer"]
