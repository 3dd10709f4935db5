"""Protocols the application layer depends on."""

from __future__ import annotations

from .logger import LoggerPort, LoggerRegistryPort
from .sink import UnbufferedSinkPort
from .time import ClockPort

__all__ = [
    "ClockPort",
    "LoggerPort",
    "LoggerRegistryPort",
    "UnbufferedSinkPort",
]
