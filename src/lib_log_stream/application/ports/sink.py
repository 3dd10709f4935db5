"""Port for unbuffered character sinks."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class UnbufferedSinkPort(Protocol):
    """Receive characters one at a time and commit each immediately."""

    def write_one(self, char: str) -> bool:
        """Commit ``char``; return ``False`` when the sink could not accept it."""


__all__ = ["UnbufferedSinkPort"]
