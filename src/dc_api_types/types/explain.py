"""Explain types (``POST /explain`` takes a QueryRequest)."""

from __future__ import annotations

from ..core.base import WireModel


class ExplainResponse(WireModel):
    # Lines of the formatted explain plan response
    lines: tuple[str, ...]
    # The generated query, i.e. SQL or equivalent
    query: str
