"""Domain values used by the line-buffered log stream."""

from __future__ import annotations

from .message_buffer import MessageBuffer
from .priority import Priority, PriorityLike
from .records import LogRecord

__all__ = [
    "LogRecord",
    "MessageBuffer",
    "Priority",
    "PriorityLike",
]
