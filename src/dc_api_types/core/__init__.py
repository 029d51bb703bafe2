"""
Core module - base model, codec, errors and type registry.
"""

from __future__ import annotations

from .base import WireModel, open_enum, tagged_union, untagged_union
from .codec import decode, decode_json, encode, encode_json, json_kind, wire_path
from .errors import (
    AgentError,
    ConfigError,
    DataConnectorTypesError,
    DecodeError,
    MalformedInputError,
    MissingFieldError,
    TypeMismatchError,
    UnknownTypeError,
    UnrecognizedVariantError,
    format_path,
)
from .registry import TypeRegistry, default_registry

__all__ = [
    # Base
    "WireModel",
    "open_enum",
    "tagged_union",
    "untagged_union",
    # Codec
    "decode",
    "decode_json",
    "encode",
    "encode_json",
    "json_kind",
    "wire_path",
    # Errors
    "DataConnectorTypesError",
    "DecodeError",
    "MissingFieldError",
    "TypeMismatchError",
    "UnrecognizedVariantError",
    "MalformedInputError",
    "UnknownTypeError",
    "AgentError",
    "ConfigError",
    "format_path",
    # Registry
    "TypeRegistry",
    "default_registry",
]
