from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO

import pytest
from rich.console import Console

from lib_log_stream.adapters.memory import MemoryLogger


class FixedClock:
    def __init__(self, moment: datetime | None = None) -> None:
        self.moment = moment or datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self.moment


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def record_console() -> Console:
    """Rich console writing into memory so tests can export what was printed."""

    return Console(file=StringIO(), record=True, width=200, color_system=None)


@pytest.fixture
def memory_logger(fixed_clock: FixedClock) -> MemoryLogger:
    return MemoryLogger("tests", clock=fixed_clock)
