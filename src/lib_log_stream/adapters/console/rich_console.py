"""Rich-powered console logger implementing :class:`LoggerPort`.

Purpose
-------
Render every dispatched line on a terminal with a per-priority style so the
CLI and interactive hosts get readable output without configuring stdlib
handlers.

Contents
--------
* :data:`_STYLE_MAP` - default priority-to-style mapping.
* :class:`RichConsoleLogger` - logger used by the ``relay`` and ``demo`` commands.

System Role
-----------
Human-facing sink. Delivery is best-effort: console failures are reported via
the module logger and never propagate into the stream that dispatched the line.
"""

from __future__ import annotations

import logging
from typing import Mapping

from rich.console import Console

from lib_log_stream.application.ports.logger import LoggerPort
from lib_log_stream.application.ports.time import ClockPort
from lib_log_stream.domain.priority import Priority
from lib_log_stream.domain.records import LogRecord

from ..memory import SystemClock

LOGGER = logging.getLogger(__name__)

_STYLE_MAP: Mapping[Priority, str] = {
    Priority.FATAL: "bold white on red",
    Priority.CRITICAL: "bold red",
    Priority.ERROR: "red",
    Priority.WARNING: "yellow",
    Priority.NOTICE: "green",
    Priority.INFORMATION: "cyan",
    Priority.DEBUG: "dim",
    Priority.TRACE: "dim italic",
}

#: Default Rich styles keyed by :class:`Priority`.


class RichConsoleLogger(LoggerPort):
    """Print records with Rich, one console line per record."""

    def __init__(
        self,
        name: str = "",
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[Priority | str, str] | None = None,
        clock: ClockPort | None = None,
    ) -> None:
        """Configure the console logger with colour and style overrides."""
        self.name = name
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        self._clock = clock or SystemClock()
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            priority = Priority.from_name(key) if isinstance(key, str) else key
            merged[priority] = value
        self._style_map = merged

    @property
    def console(self) -> Console:
        """Return the Rich console receiving output."""

        return self._console

    def style_for(self, priority: Priority) -> str:
        """Return the Rich style applied to ``priority`` lines."""
        return "" if self._no_color else self._style_map.get(priority, "")

    def log(self, text: str, priority: Priority) -> None:
        """Print the record; console errors are logged and swallowed.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=200)
        >>> RichConsoleLogger("doc", console=console).log("ready", Priority.NOTICE)
        >>> "NOTICE doc: ready" in console.export_text()
        True
        """
        try:
            record = LogRecord(text=text, priority=priority, logger_name=self.name, timestamp=self._clock.now())
            self._console.print(
                self.format_line(record),
                style=self.style_for(priority),
                markup=False,
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )
        except Exception as exc:  # noqa: BLE001
            LOGGER.error("Console delivery failed for logger %r", self.name, exc_info=exc)

    @staticmethod
    def format_line(record: LogRecord) -> str:
        """Return a human-friendly console line for ``record``.

        Examples
        --------
        >>> from datetime import datetime, timezone
        >>> record = LogRecord("boom", Priority.ERROR, "app", datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc))
        >>> RichConsoleLogger.format_line(record)
        '2025-09-30T12:00:00+00:00 ✖       ERROR app: boom'
        """
        name = record.logger_name or "root"
        return f"{record.timestamp.isoformat()} {record.priority.icon} {record.priority.name:>11} {name}: {record.text}"


__all__ = ["RichConsoleLogger"]
