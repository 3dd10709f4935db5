"""Stdlib :mod:`logging` adapters implementing the logger ports.

Purpose
-------
Let a log stream feed the standard library logging tree, which owns routing,
filtering, handlers and their error policy.

Contents
--------
* :func:`install_level_names` – registers ``NOTICE`` and ``TRACE`` when still free.
* :class:`StdlibLoggerAdapter` – :class:`LoggerPort` over :class:`logging.Logger`.
* :class:`StdlibLoggerRegistry` – :class:`LoggerRegistryPort` over
  :func:`logging.getLogger`; default registry for name-based streams.

System Role
-----------
Default downstream collaborator. Delivery failures inside handlers are
reported by :meth:`logging.Handler.handleError` and never reach the stream.
"""

from __future__ import annotations

import logging
import threading

from lib_log_stream.application.ports.logger import LoggerPort, LoggerRegistryPort
from lib_log_stream.domain.priority import Priority

_EXTRA_LEVEL_NAMES = (Priority.NOTICE, Priority.TRACE)
_INSTALL_LOCK = threading.Lock()
_installed = False


def install_level_names() -> None:
    """Register names for the priorities stdlib logging does not know.

    Idempotent. Names and numbers the host already registered are left
    untouched, so ``FATAL`` keeps meaning :data:`logging.CRITICAL`.

    Examples
    --------
    >>> install_level_names()
    >>> logging.getLevelName(25)
    'NOTICE'
    >>> logging.getLevelName("FATAL") == logging.CRITICAL
    True
    """
    global _installed
    with _INSTALL_LOCK:
        if _installed:
            return
        for priority in _EXTRA_LEVEL_NAMES:
            level = priority.to_python_level()
            level_taken = logging.getLevelName(level) != f"Level {level}"
            name_taken = isinstance(logging.getLevelName(priority.name), int)
            if not (level_taken or name_taken):
                logging.addLevelName(level, priority.name)
        _installed = True


class StdlibLoggerAdapter(LoggerPort):
    """Forward records to a :class:`logging.Logger` at the mapped level."""

    def __init__(self, logger: logging.Logger) -> None:
        install_level_names()
        self._logger = logger

    @property
    def name(self) -> str:
        """Return the wrapped logger's dotted name."""

        return self._logger.name

    @property
    def wrapped(self) -> logging.Logger:
        """Return the stdlib logger receiving records."""

        return self._logger

    def log(self, text: str, priority: Priority) -> None:
        """Emit ``text`` via :meth:`logging.Logger.log`; filtering stays with the logger."""
        self._logger.log(priority.to_python_level(), text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._logger.name!r})"


class StdlibLoggerRegistry(LoggerRegistryPort):
    """Resolve names through :func:`logging.getLogger`.

    Unknown names are created on demand and the empty name yields the root
    logger, which is the stdlib registry's documented policy.
    """

    def get(self, name: str) -> StdlibLoggerAdapter:
        return StdlibLoggerAdapter(logging.getLogger(name or None))


__all__ = ["StdlibLoggerAdapter", "StdlibLoggerRegistry", "install_level_names"]
