"""
Custom exceptions for the Data Connector types package.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Sequence

if TYPE_CHECKING:
    from ..types.error import ErrorResponse


Path = tuple[Any, ...]


def format_path(path: Path) -> str:
    """
    Render a wire path as a dotted string.

    Examples:
        ("query", "fields", "name") -> query.fields.name
        ("relationships", 0, "target") -> relationships[0].target
        () -> <root>
    """
    if not path:
        return "<root>"
    rendered = ""
    for part in path:
        if isinstance(part, int):
            rendered += f"[{part}]"
        elif rendered:
            rendered += f".{part}"
        else:
            rendered = str(part)
    return rendered


class DataConnectorTypesError(Exception):
    """Base exception for all dc-api-types errors."""
    pass


class DecodeError(DataConnectorTypesError):
    """
    Raised when wire JSON cannot be decoded into a native type.

    The raised error describes the first failure found; ``issues`` holds
    every failure reported for the same input, in order.
    """

    def __init__(self, path: Path, message: str):
        self.path = tuple(path)
        self.message = message
        self.issues: tuple[DecodeError, ...] = (self,)
        super().__init__(f"{format_path(self.path)}: {message}")

    def with_issues(self, issues: Sequence[DecodeError]) -> DecodeError:
        self.issues = tuple(issues) or (self,)
        return self


class MissingFieldError(DecodeError):
    """A required field is absent."""

    def __init__(self, path: Path):
        super().__init__(path, "required field is missing")


class TypeMismatchError(DecodeError):
    """A value is present but has the wrong JSON kind or range."""

    def __init__(self, path: Path, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(path, f"expected {expected}, got {actual}")


class UnrecognizedVariantError(DecodeError):
    """A union or enum value matches none of the known alternatives."""

    def __init__(self, path: Path, detail: Optional[str] = None):
        self.detail = detail
        message = "value matches none of the expected variants"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(path, message)


class MalformedInputError(DecodeError):
    """The input is not well-formed JSON at all."""

    def __init__(self, reason: str):
        super().__init__((), f"malformed input: {reason}")


class UnknownTypeError(DataConnectorTypesError):
    """Raised when a type name is not present in the registry."""

    def __init__(self, name: str, available: Sequence[str] = ()):
        self.name = name
        self.available = list(available)
        super().__init__(f"Unknown type '{name}'")


class AgentError(DataConnectorTypesError):
    """Raised when a data connector agent call fails."""

    def __init__(
        self,
        status_code: int,
        message: str,
        response: Optional[ErrorResponse] = None,
    ):
        self.status_code = status_code
        self.message = message
        self.response = response
        super().__init__(f"Agent returned {status_code}: {message}")


class ConfigError(DataConnectorTypesError):
    """Raised when the configuration file is invalid."""
    pass
