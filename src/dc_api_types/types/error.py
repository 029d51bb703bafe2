"""Error payload returned by an agent with a non-2xx status."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from ..core.base import JsonObject, WireModel


class ErrorResponseType(str, Enum):
    UNCAUGHT_ERROR = "uncaught-error"
    MUTATION_CONSTRAINT_VIOLATION = "mutation-constraint-violation"
    MUTATION_PERMISSION_CHECK_FAILURE = "mutation-permission-check-failure"


class ErrorResponse(WireModel):
    details: Optional[JsonObject] = None
    message: str
    type: Optional[ErrorResponseType] = None
