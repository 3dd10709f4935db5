"""Concrete stream and logger adapters."""

from __future__ import annotations

from .console.rich_console import RichConsoleLogger
from .memory import MemoryLogger, MemoryLoggerRegistry, SystemClock
from .stdlib_logging import StdlibLoggerAdapter, StdlibLoggerRegistry, install_level_names
from .unbuffered_stream import UnbufferedTextStream

__all__ = [
    "MemoryLogger",
    "MemoryLoggerRegistry",
    "RichConsoleLogger",
    "StdlibLoggerAdapter",
    "StdlibLoggerRegistry",
    "SystemClock",
    "UnbufferedTextStream",
    "install_level_names",
]
