from __future__ import annotations

import logging

import pytest

from lib_log_stream.domain.priority import Priority


@pytest.mark.parametrize(
    "name, expected",
    [
        ("fatal", Priority.FATAL),
        ("CRITICAL", Priority.CRITICAL),
        ("Error", Priority.ERROR),
        ("warning", Priority.WARNING),
        ("notice", Priority.NOTICE),
        ("INFORMATION", Priority.INFORMATION),
        ("debug", Priority.DEBUG),
        (" trace ", Priority.TRACE),
    ],
)
def test_from_name_accepts_case_insensitive_matches(name: str, expected: Priority) -> None:
    assert Priority.from_name(name) is expected


@pytest.mark.parametrize(
    "alias, expected",
    [("info", Priority.INFORMATION), ("WARN", Priority.WARNING), ("crit", Priority.CRITICAL)],
)
def test_from_name_accepts_aliases(alias: str, expected: Priority) -> None:
    assert Priority.from_name(alias) is expected


def test_from_name_rejects_unknown_priority() -> None:
    with pytest.raises(ValueError, match="Unknown priority"):
        Priority.from_name("verbose")


def test_numeric_values_run_from_fatal_to_trace() -> None:
    assert [priority.value for priority in Priority] == list(range(1, 9))
    assert Priority.from_numeric(1) is Priority.FATAL
    assert Priority.from_numeric(8) is Priority.TRACE


@pytest.mark.parametrize("number", [0, 9, -1])
def test_from_numeric_rejects_out_of_range(number: int) -> None:
    with pytest.raises(ValueError, match="Unsupported priority numeric"):
        Priority.from_numeric(number)


@pytest.mark.parametrize(
    "level, expected",
    [
        (logging.DEBUG, Priority.DEBUG),
        (logging.INFO, Priority.INFORMATION),
        (logging.WARNING, Priority.WARNING),
        (logging.ERROR, Priority.ERROR),
        (logging.CRITICAL, Priority.CRITICAL),
        (25, Priority.NOTICE),
        (5, Priority.TRACE),
    ],
)
def test_from_python_level_maps_known_levels(level: int, expected: Priority) -> None:
    assert Priority.from_python_level(level) is expected


@pytest.mark.parametrize("level", [0, 15, 35, 45, 60])
def test_from_python_level_rejects_unmapped_levels(level: int) -> None:
    with pytest.raises(ValueError, match="Unsupported python logging level"):
        Priority.from_python_level(level)


@pytest.mark.parametrize("priority", [priority for priority in Priority if priority is not Priority.FATAL])
def test_python_level_round_trips(priority: Priority) -> None:
    assert Priority.from_python_level(priority.to_python_level()) is priority


def test_fatal_shares_the_critical_level_like_stdlib() -> None:
    assert Priority.FATAL.to_python_level() == logging.CRITICAL == logging.FATAL
    assert Priority.from_python_level(logging.FATAL) is Priority.CRITICAL


def test_coerce_accepts_priority_name_and_level() -> None:
    assert Priority.coerce(Priority.NOTICE) is Priority.NOTICE
    assert Priority.coerce("notice") is Priority.NOTICE
    assert Priority.coerce(25) is Priority.NOTICE


@pytest.mark.parametrize("value", [None, 2.5, True])
def test_coerce_rejects_other_types(value: object) -> None:
    with pytest.raises(TypeError, match="Cannot interpret"):
        Priority.coerce(value)  # type: ignore[arg-type]


@pytest.mark.parametrize("priority", Priority)
def test_presentation_metadata_is_complete(priority: Priority) -> None:
    assert priority.severity == priority.name.lower()
    assert len(priority.code) == 4
    assert priority.icon


def test_codes_are_unique() -> None:
    assert len({priority.code for priority in Priority}) == len(Priority)
