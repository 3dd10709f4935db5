"""Application use cases."""

from __future__ import annotations

from .line_assembler import TERMINATORS, LineAssembler

__all__ = ["LineAssembler", "TERMINATORS"]
