"""
Encode/decode between native types and Data Connector wire JSON.

Usage:
    from dc_api_types import QueryRequest, decode, encode

    request = decode(QueryRequest, payload)   # raises DecodeError on bad input
    payload = encode(request)                 # never fails
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import (
    DecodeError,
    MalformedInputError,
    MissingFieldError,
    TypeMismatchError,
    UnrecognizedVariantError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Name of the discriminant field of every tagged union
DISCRIMINATOR = "type"

# pydantic error type -> JSON kind the schema expected
EXPECTED_KINDS = {
    "string_type": "string",
    "string_unicode": "string",
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "float_type": "number",
    "list_type": "array",
    "tuple_type": "array",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
    "greater_than_equal": "unsigned 64-bit integer",
    "less_than_equal": "unsigned 64-bit integer",
    "too_short": "non-empty array",
    "extra_forbidden": "no additional field",
    "frozen_instance": "object",
}

def _reject_constant(name: str) -> Any:
    raise MalformedInputError(f"'{name}' is not a JSON value")


_adapters: dict[int, tuple[Any, TypeAdapter]] = {}


def _adapter(tp: Any) -> TypeAdapter:
    """Get or create the TypeAdapter for a type or type alias."""
    cached = _adapters.get(id(tp))
    if cached is None or cached[0] is not tp:
        cached = (tp, TypeAdapter(tp))
        _adapters[id(tp)] = cached
    return cached[1]


def json_kind(value: Any) -> str:
    """Name the JSON kind of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _child(current: Any, part: Any) -> tuple[bool, Any]:
    """Step from ``current`` into ``part`` when it is a key or index of it."""
    if isinstance(current, dict) and part in current:
        return True, current[part]
    if (
        isinstance(current, (list, tuple))
        and isinstance(part, int)
        and not isinstance(part, bool)
        and 0 <= part < len(current)
    ):
        return True, current[part]
    return False, None


def _is_tag_label(current: Any, part: Any, following: Any) -> bool:
    if not isinstance(current, dict) or current.get(DISCRIMINATOR) != part:
        return False
    if part not in current:
        return True
    # Tag equal to a field name of its own variant (a "column" variant with a
    # "column" field): a label when the next step stays in this object or the
    # field value has no children.
    if _child(current, following)[0]:
        return True
    return not isinstance(current[part], (dict, list, tuple))


def wire_path(loc: tuple[Any, ...], data: Any) -> tuple[Any, ...]:
    """
    Translate a pydantic error location into a path through the input.

    pydantic inserts the discriminant value of tagged unions into ``loc``
    (e.g. ``("where", "binary_op", "value")``). Those labels are not part of
    the wire document and are dropped by walking the input alongside.
    """
    path: list[Any] = []
    current = data
    last = len(loc) - 1
    for index, part in enumerate(loc):
        if index < last and _is_tag_label(current, part, loc[index + 1]):
            continue
        found, child = _child(current, part)
        if found:
            path.append(part)
            current = child
        elif index == last:
            path.append(part)
        # anything else is a union member label
    return tuple(path)


def _issue_from_error(error: dict[str, Any], data: Any) -> DecodeError:
    """Map one pydantic error onto the decode error taxonomy."""
    error_type = error["type"]
    path = wire_path(tuple(error["loc"]), data)
    value = error.get("input")
    ctx = error.get("ctx") or {}

    if error_type == "missing":
        return MissingFieldError(path)

    if error_type == "union_tag_not_found":
        discriminator = str(ctx.get("discriminator", DISCRIMINATOR)).strip("'\"")
        return MissingFieldError(path + (discriminator,))

    if error_type == "union_tag_invalid":
        return UnrecognizedVariantError(path, f"unknown {DISCRIMINATOR} '{ctx.get('tag')}'")

    if error_type == "unrecognized_variant":
        return UnrecognizedVariantError(path)

    if error_type in ("enum", "literal_error"):
        if not isinstance(value, str):
            return TypeMismatchError(path, "string", json_kind(value))
        return UnrecognizedVariantError(path, f"expected {ctx.get('expected')}")

    if error_type in ("json_invalid", "json_type"):
        return MalformedInputError(error.get("msg", error_type))

    expected = EXPECTED_KINDS.get(error_type, error.get("msg", error_type))
    return TypeMismatchError(path, expected, json_kind(value))


def _decode_error(exc: ValidationError, data: Any, type_name: str) -> DecodeError:
    issues = [_issue_from_error(error, data) for error in exc.errors()]
    logger.debug(
        f"Failed to decode {type_name}: {len(issues)} issue(s), first: {issues[0]}"
    )
    return issues[0].with_issues(issues)


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


def decode(tp: type[T], data: Any) -> T:
    """
    Decode JSON-compatible data (dicts, lists, scalars) into ``tp``.

    Args:
        tp: A wire model class or union alias (e.g. ``QueryRequest``,
            ``Expression``)
        data: Parsed wire JSON

    Returns:
        The native value

    Raises:
        DecodeError: MissingFieldError, TypeMismatchError,
            UnrecognizedVariantError or MalformedInputError
    """
    try:
        return _adapter(tp).validate_python(data)
    except ValidationError as exc:
        raise _decode_error(exc, data, _type_name(tp)) from exc


def decode_json(tp: type[T], text: Union[str, bytes, bytearray]) -> T:
    """Parse JSON text and decode it into ``tp``."""
    try:
        if isinstance(text, (bytes, bytearray)):
            text = text.decode("utf-8")
        data = json.loads(text, parse_constant=_reject_constant)
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"invalid UTF-8: {exc.reason}") from exc
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"{exc.msg} at line {exc.lineno} column {exc.colno}") from exc
    return decode(tp, data)


def encode(value: Any, tp: Optional[Any] = None) -> Any:
    """
    Encode a native value into JSON-compatible data.

    Args:
        value: A wire model instance, or any value of ``tp``
        tp: Type to encode with; defaults to the value's own model class

    Returns:
        Dicts, lists and JSON scalars
    """
    if tp is None and isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    return _adapter(tp if tp is not None else type(value)).dump_python(
        value, mode="json", by_alias=True
    )


def encode_json(value: Any, tp: Optional[Any] = None, indent: Optional[int] = None) -> str:
    """Encode a native value into JSON text."""
    return json.dumps(encode(value, tp), indent=indent, ensure_ascii=False)
