"""Raw query types (``POST /raw``)."""

from __future__ import annotations

from ..core.base import JsonObject, WireModel


class RawRequest(WireModel):
    # A string representing a raw query
    query: str


class RawResponse(WireModel):
    rows: tuple[JsonObject, ...]
