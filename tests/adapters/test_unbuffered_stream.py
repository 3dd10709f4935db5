from __future__ import annotations

import pytest

from lib_log_stream.adapters.unbuffered_stream import UnbufferedTextStream


class _Sink:
    def __init__(self, reject: str = "") -> None:
        self.chars: list[str] = []
        self.reject = reject

    def write_one(self, char: str) -> bool:
        if char in self.reject:
            return False
        self.chars.append(char)
        return True

    @property
    def text(self) -> str:
        return "".join(self.chars)


def test_write_commits_each_character_in_order() -> None:
    sink = _Sink()
    stream = UnbufferedTextStream(sink)
    assert stream.write("héllo\n") == 6
    assert sink.chars == list("héllo\n")
    assert stream.good()


def test_print_and_writelines_route_through_write() -> None:
    sink = _Sink()
    stream = UnbufferedTextStream(sink)
    print("a", 1, file=stream)
    stream.writelines(["b\n", "c"])
    assert sink.text == "a 1\nb\nc"


def test_stream_reports_writable_and_not_readable() -> None:
    stream = UnbufferedTextStream(_Sink())
    assert stream.writable() is True
    assert stream.readable() is False


def test_write_rejects_non_strings() -> None:
    stream = UnbufferedTextStream(_Sink())
    with pytest.raises(TypeError, match="must be str"):
        stream.write(b"bytes")  # type: ignore[arg-type]


def test_write_after_close_raises() -> None:
    stream = UnbufferedTextStream(_Sink())
    stream.close()
    with pytest.raises(ValueError, match="closed"):
        stream.write("x")


def test_rejected_character_sets_failed_state_and_abandons_write() -> None:
    sink = _Sink(reject="!")
    stream = UnbufferedTextStream(sink)
    assert stream.write("ab!cd") == 2
    assert stream.failed is True
    assert stream.good() is False
    assert sink.text == "ab"


def test_failed_stream_commits_nothing_until_cleared() -> None:
    sink = _Sink(reject="!")
    stream = UnbufferedTextStream(sink)
    stream.write("!")
    assert stream.write("ignored") == 0
    assert sink.text == ""

    stream.clear_error()
    assert stream.good()
    assert stream.write("ok") == 2
    assert sink.text == "ok"


def test_flush_commits_nothing_extra() -> None:
    sink = _Sink()
    stream = UnbufferedTextStream(sink)
    stream.write("abc")
    stream.flush()
    assert sink.text == "abc"
