from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from lib_log_stream.domain.priority import Priority
from lib_log_stream.domain.records import LogRecord


def _record(**changes: object) -> LogRecord:
    payload: dict[str, object] = {
        "text": "hello",
        "priority": Priority.NOTICE,
        "logger_name": "tests",
        "timestamp": datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc),
    }
    payload.update(changes)
    return LogRecord(**payload)  # type: ignore[arg-type]


def test_record_requires_timezone_aware_timestamp() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        _record(timestamp=datetime(2025, 9, 23, 12, 0))


def test_record_normalises_timestamp_to_utc() -> None:
    cest = timezone(timedelta(hours=2))
    record = _record(timestamp=datetime(2025, 9, 23, 14, 0, tzinfo=cest))
    assert record.timestamp == datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc)
    assert record.timestamp.tzinfo is timezone.utc


def test_record_allows_empty_text() -> None:
    assert _record(text="").text == ""


@pytest.mark.parametrize("text", ["a\nb", "a\r", "\n"])
def test_record_rejects_line_terminators(text: str) -> None:
    with pytest.raises(ValueError, match="terminators"):
        _record(text=text)


def test_record_serialises_to_sorted_json() -> None:
    payload = json.loads(_record().to_json())
    assert payload == {
        "logger_name": "tests",
        "priority": "notice",
        "text": "hello",
        "timestamp": "2025-09-23T12:00:00+00:00",
    }


def test_record_restores_from_dict() -> None:
    original = _record(priority=Priority.TRACE)
    assert LogRecord.from_dict(original.to_dict()) == original
