"""
Type registry - maps OpenAPI component names to native types.

Usage:
    from dc_api_types.core.registry import default_registry

    registry = default_registry()
    QueryRequest = registry.get("QueryRequest")
    names = registry.names()
"""

from __future__ import annotations

import inspect
import logging
from enum import Enum
from typing import Any, Iterator, Optional

from pydantic import BaseModel

from .errors import UnknownTypeError

logger = logging.getLogger(__name__)


# Request/response bodies of the agent endpoints
ENDPOINT_TYPES = {
    "capabilities": (None, "CapabilitiesResponse"),
    "schema": ("SchemaRequest", "SchemaResponse"),
    "query": ("QueryRequest", "QueryResponse"),
    "explain": ("QueryRequest", "ExplainResponse"),
    "mutation": ("MutationRequest", "MutationResponse"),
    "raw": ("RawRequest", "RawResponse"),
}


class TypeRegistry:
    """
    Registry of wire types keyed by component name.

    Holds model classes, enums and union aliases (which have no ``__name__``
    of their own, hence the explicit names).
    """

    def __init__(self):
        self._types: dict[str, Any] = {}

    def register(self, name: str, tp: Any) -> None:
        """Register ``tp`` under ``name``, replacing any previous entry."""
        if name in self._types and self._types[name] is not tp:
            logger.warning(f"Replacing registered type '{name}'")
        self._types[name] = tp

    def get(self, name: str) -> Any:
        """Look up a type by component name."""
        if name not in self._types:
            raise UnknownTypeError(name, self.names())
        return self._types[name]

    def find(self, name: str) -> Optional[Any]:
        return self._types.get(name)

    def names(self) -> list[str]:
        return sorted(self._types)

    def items(self) -> Iterator[tuple[str, Any]]:
        for name in self.names():
            yield name, self._types[name]

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)


def type_kind(tp: Any) -> str:
    """Classify a registered type as "model", "enum" or "alias"."""
    if inspect.isclass(tp) and issubclass(tp, BaseModel):
        return "model"
    if inspect.isclass(tp) and issubclass(tp, Enum):
        return "enum"
    return "alias"


def default_registry() -> TypeRegistry:
    """Registry with every type exported by ``dc_api_types.types``."""
    from .. import types as wire_types

    registry = TypeRegistry()
    for name in wire_types.__all__:
        registry.register(name, getattr(wire_types, name))
    return registry
