"""Logger ports describing the downstream collaborator of a log stream.

Purpose
-------
Define the narrow contract a log stream needs from a logger (deliver one
``(text, priority)`` record) and from a named-logger registry (resolve a
name to such a logger).

Contents
--------
* :class:`LoggerPort` – runtime-checkable protocol with a single ``log`` method.
* :class:`LoggerRegistryPort` – protocol resolving logger names.

System Role
-----------
Keeps the line assembler independent of routing, filtering and sink concerns;
adapters plug in stdlib, in-memory or Rich console loggers.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_stream.domain.priority import Priority


@runtime_checkable
class LoggerPort(Protocol):
    """Deliver records to whatever sinks the logger owns.

    Delivery is best-effort: implementations handle their own failures and
    never raise into the stream that dispatched the record.
    """

    name: str

    def log(self, text: str, priority: Priority) -> None:
        """Deliver ``text`` as one record tagged with ``priority``."""


@runtime_checkable
class LoggerRegistryPort(Protocol):
    """Resolve logger names; unknown names follow the registry's own policy."""

    def get(self, name: str) -> LoggerPort:
        """Return the logger registered under ``name``."""


__all__ = ["LoggerPort", "LoggerRegistryPort"]
