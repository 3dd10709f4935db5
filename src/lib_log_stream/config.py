"""Configuration helpers for the command-line layer.

Purpose
-------
Load optional ``.env`` files and translate environment variables into the
settings the ``relay`` command uses to build a :class:`LogStream`.

Contents
--------
* :data:`DOTENV_ENV_VAR` – toggle enabling ``.env`` loading.
* :func:`should_use_dotenv` / :func:`enable_dotenv` – dotenv handling via
  ``python-dotenv``.
* :class:`StreamSettings` / :func:`load_stream_settings` – environment-aware
  stream settings.

System Role
-----------
Only the CLI reads the environment; :class:`LogStream` itself is configured
through constructor arguments alone.

Environment Variables
---------------------
``LOG_STREAM_LOGGER``, ``LOG_STREAM_PRIORITY`` and ``LOG_STREAM_CAPACITY``
take precedence over the values passed to :func:`load_stream_settings`.
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .domain.priority import Priority, PriorityLike
from .log_stream import DEFAULT_BUFFER_CAPACITY

DOTENV_ENV_VAR = "LOG_STREAM_USE_DOTENV"
LOGGER_ENV_VAR = "LOG_STREAM_LOGGER"
PRIORITY_ENV_VAR = "LOG_STREAM_PRIORITY"
CAPACITY_ENV_VAR = "LOG_STREAM_CAPACITY"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}

_DOTENV_LOCK = threading.Lock()
_DOTENV_LOADED = False
_DOTENV_PATH: Path | None = None


def _env_bool(value: str | None) -> bool | None:
    """Interpret ``value`` as a boolean toggle; ``None`` when unset or unknown."""
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    return None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` files should be loaded.

    An explicit CLI flag wins; otherwise a truthy ``LOG_STREAM_USE_DOTENV``
    value enables loading.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    """
    if explicit is not None:
        return explicit
    return bool(_env_bool(env_value))


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` walking upward from ``search_from`` (default: cwd).

    Existing environment variables keep precedence. The outcome is cached so
    repeated calls are cheap.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """
    global _DOTENV_LOADED, _DOTENV_PATH
    with _DOTENV_LOCK:
        if _DOTENV_LOADED:
            return _DOTENV_PATH
        if search_from is None:
            located = find_dotenv(usecwd=True)
            candidate = Path(located).resolve() if located else None
        else:
            candidate = _find_upwards(search_from)
        if candidate is not None:
            load_dotenv(candidate, override=False)
        _DOTENV_PATH = candidate
        _DOTENV_LOADED = True
        return candidate


def _find_upwards(start: Path) -> Path | None:
    """Return the first ``.env`` in ``start`` or one of its parents."""
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    """Forget the cached dotenv outcome."""
    global _DOTENV_LOADED, _DOTENV_PATH
    with _DOTENV_LOCK:
        _DOTENV_LOADED = False
        _DOTENV_PATH = None


@dataclass(frozen=True)
class StreamSettings:
    """Resolved inputs for constructing a :class:`LogStream`."""

    logger_name: str
    priority: Priority
    capacity: int


def load_stream_settings(
    *,
    logger_name: str = "",
    priority: PriorityLike = Priority.INFORMATION,
    capacity: int = DEFAULT_BUFFER_CAPACITY,
) -> StreamSettings:
    """Merge call arguments with ``LOG_STREAM_*`` overrides.

    Raises
    ------
    ValueError
        When the priority is unknown or the capacity is not a non-negative
        integer.

    Examples
    --------
    >>> load_stream_settings(priority="warn", capacity=16)  # doctest: +SKIP
    StreamSettings(logger_name='', priority=<Priority.WARNING: 4>, capacity=16)
    """
    logger_name = os.getenv(LOGGER_ENV_VAR, logger_name)
    priority_value: PriorityLike = os.getenv(PRIORITY_ENV_VAR) or priority
    capacity_value: str | int = os.getenv(CAPACITY_ENV_VAR) or capacity
    return StreamSettings(
        logger_name=logger_name,
        priority=_coerce_priority(priority_value),
        capacity=_coerce_capacity(capacity_value),
    )


def _coerce_priority(value: PriorityLike) -> Priority:
    """Accept names, stdlib level numbers (also as strings) and priorities."""
    if isinstance(value, str) and value.strip().isdigit():
        return Priority.from_python_level(int(value))
    try:
        return Priority.coerce(value)
    except TypeError as exc:
        raise ValueError(str(exc)) from exc


def _coerce_capacity(value: str | int) -> int:
    try:
        capacity = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{CAPACITY_ENV_VAR} must be an integer, got {value!r}") from exc
    if capacity < 0:
        raise ValueError(f"{CAPACITY_ENV_VAR} must not be negative, got {capacity}")
    return capacity


__all__ = [
    "CAPACITY_ENV_VAR",
    "DOTENV_ENV_VAR",
    "LOGGER_ENV_VAR",
    "PRIORITY_ENV_VAR",
    "StreamSettings",
    "enable_dotenv",
    "load_stream_settings",
    "should_use_dotenv",
]
