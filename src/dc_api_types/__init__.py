"""
dc-api-types - Python types for the Hasura GraphQL Data Connector API.

Native, immutable types for every object of the Data Connector OpenAPI
document, plus encode/decode to and from the wire JSON.

Usage:
    from dc_api_types import QueryRequest, decode, encode

    request = decode(QueryRequest, payload)
    assert decode(QueryRequest, encode(request)) == request
"""

from __future__ import annotations

__version__ = "0.1.0"

from .client import AgentClient
from .core import (
    AgentError,
    ConfigError,
    DataConnectorTypesError,
    DecodeError,
    MalformedInputError,
    MissingFieldError,
    TypeMismatchError,
    TypeRegistry,
    UnknownTypeError,
    UnrecognizedVariantError,
    WireModel,
    decode,
    decode_json,
    default_registry,
    encode,
    encode_json,
)
from .openapi import generate_openapi
from .types import *  # noqa: F401,F403
from .types import __all__ as _types_all

__all__ = [
    "__version__",
    # Codec
    "decode",
    "decode_json",
    "encode",
    "encode_json",
    "WireModel",
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
    # Registry / tooling
    "TypeRegistry",
    "default_registry",
    "generate_openapi",
    "AgentClient",
    *_types_all,
]
