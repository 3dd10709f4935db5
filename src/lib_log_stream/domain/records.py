"""Domain record describing one dispatched line.

Purpose
-------
Provide an immutable, serialisable representation of a line handed to a
logger, so in-memory and console loggers share one data shape.

Contents
--------
* :class:`LogRecord` dataclass with serialisation helpers.
* Utility function ``_ensure_aware`` for timestamp validation.

System Role
-----------
Sits in the domain layer; adapters build records from the ``(text, priority)``
pair they receive and never mutate them afterwards.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from .priority import Priority


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


@dataclass(slots=True, frozen=True)
class LogRecord:
    """Immutable record of one dispatched line.

    Attributes
    ----------
    text:
        Characters accumulated between two buffer resets. May be empty: a
        blank line is still a record.
    priority:
        :class:`Priority` current when the terminator was consumed.
    logger_name:
        Name of the logger that received the record.
    timestamp:
        Time of delivery in timezone-aware UTC.
    """

    text: str
    priority: Priority
    logger_name: str
    timestamp: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))
        if "\n" in self.text or "\r" in self.text:
            raise ValueError("record text must not contain line terminators")

    def to_dict(self) -> dict[str, Any]:
        """Serialize the record to a dictionary with ISO8601 timestamps."""

        return {
            "text": self.text,
            "priority": self.priority.severity,
            "logger_name": self.logger_name,
            "timestamp": self.timestamp.isoformat(),
        }

    def to_json(self) -> str:
        """Serialize the record to JSON with sorted keys for deterministic output."""

        return json.dumps(self.to_dict(), sort_keys=True)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "LogRecord":
        """Reconstruct a record from :meth:`to_dict` output."""

        return cls(
            text=payload["text"],
            priority=Priority.from_name(payload["priority"]),
            logger_name=payload["logger_name"],
            timestamp=datetime.fromisoformat(payload["timestamp"]),
        )


__all__ = ["LogRecord"]
