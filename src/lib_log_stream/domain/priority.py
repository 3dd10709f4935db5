"""Priority abstraction shared by the stream facade and its loggers.

Purpose
-------
Offer a domain-specific representation of the eight record priorities that a
log stream can attach to a line, together with conversions to the stdlib
:mod:`logging` numbers and presentation metadata.

Contents
--------
* :class:`Priority` enum with conversion helpers and presentation metadata.
* ``_PYTHON_LEVELS``, ``_ICON_TABLE`` and ``_CODE_TABLE`` lookup constants.

System Role
-----------
Used by the line assembler to tag dispatched records and by the adapters to
map priorities onto stdlib levels or console styles.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class Priority(Enum):
    """Enumerated record priorities, most urgent first."""

    FATAL = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFORMATION = 6
    DEBUG = 7
    TRACE = 8

    @property
    def severity(self) -> str:
        """Return the lowercase priority name used by method names and payloads."""

        return self.name.lower()

    @property
    def icon(self) -> str:
        """Return the unicode icon visualizing the priority on colored consoles."""

        return _ICON_TABLE[self]

    @property
    def code(self) -> str:
        """Return the fixed-width four letter tag for compact output."""

        return _CODE_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` level number matching this priority.

        Examples
        --------
        >>> Priority.NOTICE.to_python_level()
        25
        >>> Priority.FATAL.to_python_level() == Priority.CRITICAL.to_python_level()
        True
        """

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> "Priority":
        """Resolve ``name`` case-insensitively, accepting the common aliases.

        Examples
        --------
        >>> Priority.from_name("warn")
        <Priority.WARNING: 4>
        """
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown priority: {name!r}") from exc

    @classmethod
    def from_numeric(cls, value: int) -> "Priority":
        """Return the :class:`Priority` whose enum value equals ``value``."""
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unsupported priority numeric: {value}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "Priority":
        """Translate a stdlib logging level number into :class:`Priority`."""
        try:
            return _FROM_PYTHON_LEVELS[level]
        except KeyError as exc:
            raise ValueError(f"Unsupported python logging level: {level}") from exc

    @classmethod
    def coerce(cls, value: "PriorityLike") -> "Priority":
        """Normalise a priority, priority name or stdlib level number.

        Integers are interpreted as :mod:`logging` levels because that is what
        host applications usually carry around.

        Examples
        --------
        >>> Priority.coerce("error") is Priority.coerce(40) is Priority.ERROR
        True
        """
        if isinstance(value, Priority):
            return value
        if isinstance(value, str):
            return cls.from_name(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_python_level(value)
        raise TypeError(f"Cannot interpret {value!r} as a priority")


PriorityLike = Union[Priority, str, int]

_PYTHON_LEVELS = {
    Priority.FATAL: 50,
    Priority.CRITICAL: 50,
    Priority.ERROR: 40,
    Priority.WARNING: 30,
    Priority.NOTICE: 25,
    Priority.INFORMATION: 20,
    Priority.DEBUG: 10,
    Priority.TRACE: 5,
}

# Stdlib spells FATAL as an alias of CRITICAL; level 50 resolves to CRITICAL.
_FROM_PYTHON_LEVELS = {level: priority for priority, level in _PYTHON_LEVELS.items() if priority is not Priority.FATAL}

_ALIASES = {
    "INFO": "INFORMATION",
    "WARN": "WARNING",
    "CRIT": "CRITICAL",
}

_ICON_TABLE = {
    Priority.FATAL: "☠",
    Priority.CRITICAL: "‼",
    Priority.ERROR: "✖",
    Priority.WARNING: "⚠",
    Priority.NOTICE: "➤",
    Priority.INFORMATION: "ℹ",
    Priority.DEBUG: "🐞",
    Priority.TRACE: "…",
}
# Console glyphs displayed by the Rich logger per priority.

_CODE_TABLE = {
    Priority.FATAL: "FATL",
    Priority.CRITICAL: "CRIT",
    Priority.ERROR: "ERRO",
    Priority.WARNING: "WARN",
    Priority.NOTICE: "NOTE",
    Priority.INFORMATION: "INFO",
    Priority.DEBUG: "DEBG",
    Priority.TRACE: "TRCE",
}


__all__ = ["Priority", "PriorityLike"]
