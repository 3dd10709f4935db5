from __future__ import annotations

import logging

import pytest

from lib_log_stream.adapters.stdlib_logging import StdlibLoggerAdapter, StdlibLoggerRegistry, install_level_names
from lib_log_stream.domain.priority import Priority
from lib_log_stream.log_stream import LogStream


def test_install_level_names_registers_extra_priorities() -> None:
    install_level_names()
    install_level_names()
    assert logging.getLevelName(25) == "NOTICE"
    assert logging.getLevelName(5) == "TRACE"
    assert logging.getLevelName(logging.CRITICAL) == "CRITICAL"


@pytest.mark.parametrize("priority", Priority)
def test_adapter_logs_at_mapped_level(priority: Priority, caplog: pytest.LogCaptureFixture) -> None:
    adapter = StdlibLoggerAdapter(logging.getLogger("tests.stdlib"))
    with caplog.at_level(1, logger="tests.stdlib"):
        adapter.log(f"{priority.severity} text", priority)

    assert [(record.name, record.levelno, record.getMessage()) for record in caplog.records] == [
        ("tests.stdlib", priority.to_python_level(), f"{priority.severity} text")
    ]
    expected_name = {Priority.INFORMATION: "INFO", Priority.FATAL: "CRITICAL"}.get(priority, priority.name)
    assert caplog.records[0].levelname == expected_name


def test_adapter_passes_percent_signs_verbatim(caplog: pytest.LogCaptureFixture) -> None:
    adapter = StdlibLoggerAdapter(logging.getLogger("tests.percent"))
    with caplog.at_level(logging.INFO, logger="tests.percent"):
        adapter.log("100% done %s", Priority.INFORMATION)
    assert caplog.records[0].getMessage() == "100% done %s"


def test_adapter_leaves_filtering_to_the_logger(caplog: pytest.LogCaptureFixture) -> None:
    adapter = StdlibLoggerAdapter(logging.getLogger("tests.filtered"))
    with caplog.at_level(logging.WARNING, logger="tests.filtered"):
        adapter.log("dropped", Priority.DEBUG)
        adapter.log("kept", Priority.ERROR)
    assert [record.getMessage() for record in caplog.records] == ["kept"]


def test_adapter_exposes_name_and_wrapped_logger() -> None:
    wrapped = logging.getLogger("tests.named")
    adapter = StdlibLoggerAdapter(wrapped)
    assert adapter.name == "tests.named"
    assert adapter.wrapped is wrapped
    assert repr(adapter) == "StdlibLoggerAdapter('tests.named')"


def test_registry_resolves_names_through_get_logger() -> None:
    registry = StdlibLoggerRegistry()
    assert registry.get("tests.registry").wrapped is logging.getLogger("tests.registry")
    assert registry.get("").wrapped is logging.getLogger()


def test_fatal_keeps_its_stdlib_meaning_after_adapters_are_built() -> None:
    StdlibLoggerAdapter(logging.getLogger("tests.fatal_name"))
    LogStream("tests.fatal_name").close()

    assert logging.getLevelName("FATAL") == logging.CRITICAL
    assert logging.getLevelName(60) == "Level 60"


def test_set_level_fatal_still_lets_critical_through(caplog: pytest.LogCaptureFixture) -> None:
    wrapped = logging.getLogger("tests.fatal_filter")
    adapter = StdlibLoggerAdapter(wrapped)
    with caplog.at_level(logging.NOTSET, logger="tests.fatal_filter"):
        wrapped.setLevel("FATAL")
        adapter.log("critical text", Priority.CRITICAL)
        adapter.log("fatal text", Priority.FATAL)
        adapter.log("error text", Priority.ERROR)

    assert [(record.levelno, record.getMessage()) for record in caplog.records] == [
        (logging.CRITICAL, "critical text"),
        (logging.CRITICAL, "fatal text"),
    ]
