"""Application layer: ports and the line assembly use case."""

from __future__ import annotations

from .use_cases.line_assembler import LineAssembler

__all__ = ["LineAssembler"]
