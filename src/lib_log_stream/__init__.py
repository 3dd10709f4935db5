"""Public package surface of the line-buffered log stream.

Host code usually needs only :class:`LogStream` and :class:`Priority`; the
logger adapters are exported for wiring a stream to stdlib logging, memory or
a Rich console.
"""

from __future__ import annotations

from .adapters import (
    MemoryLogger,
    MemoryLoggerRegistry,
    RichConsoleLogger,
    StdlibLoggerAdapter,
    StdlibLoggerRegistry,
    UnbufferedTextStream,
)
from .application.ports import LoggerPort, LoggerRegistryPort, UnbufferedSinkPort
from .application.use_cases.line_assembler import LineAssembler
from .domain import LogRecord, Priority
from .log_stream import DEFAULT_BUFFER_CAPACITY, LogStream, summary_info

__all__ = [
    "DEFAULT_BUFFER_CAPACITY",
    "LineAssembler",
    "LogRecord",
    "LogStream",
    "LoggerPort",
    "LoggerRegistryPort",
    "MemoryLogger",
    "MemoryLoggerRegistry",
    "Priority",
    "RichConsoleLogger",
    "StdlibLoggerAdapter",
    "StdlibLoggerRegistry",
    "UnbufferedSinkPort",
    "UnbufferedTextStream",
    "summary_info",
]
