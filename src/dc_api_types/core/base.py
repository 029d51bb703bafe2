"""
Base model and shared aliases for the wire types.

Every Data Connector type is a frozen pydantic model. Optional fields that are
``None`` are left out of the wire JSON, required fields are always written
(including an explicit ``null`` for required JSON values).

Unions come in two flavours:

- tagged unions dispatch on the ``type`` discriminant directly
- untagged unions try each variant in declaration order and keep the first
  one that validates
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    PlainSerializer,
    SerializerFunctionWrapHandler,
    StrictBool,
    StrictInt,
    ValidationError,
    ValidatorFunctionWrapHandler,
    WrapValidator,
    model_serializer,
)
from pydantic_core import PydanticCustomError


# --- Name aliases (plain strings on the wire) ---

# Possibly qualified table name, the last item is the table name. Must be non-empty
TableName = Annotated[tuple[str, ...], Field(min_length=1)]
# Possibly qualified function name. Must be non-empty
FunctionName = Annotated[tuple[str, ...], Field(min_length=1)]
ColumnName = str
ScalarType = str
AggregateFunction = str
ComparisonOperator = str
UpdateOperator = str

# u64 on the wire
U64_MAX = 2**64 - 1
UInt = Annotated[StrictInt, Field(ge=0, le=U64_MAX)]

JsonObject = dict[str, JsonValue]

__all__ = [
    "AggregateFunction",
    "ColumnName",
    "ComparisonOperator",
    "FunctionName",
    "JsonObject",
    "JsonValue",
    "ScalarType",
    "StrictBool",
    "StrictInt",
    "TableName",
    "UInt",
    "UpdateOperator",
    "WireModel",
    "open_enum",
    "tagged_union",
    "untagged_union",
]


class WireModel(BaseModel):
    """Immutable data-transfer structure with Data Connector wire semantics."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_serializer(mode="wrap")
    def omit_absent_fields(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            key = field.serialization_alias or field.alias or name
            if not field.is_required() and key in data and data[key] is None:
                del data[key]
        return data


def _reject_unmatched(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    try:
        return handler(value)
    except ValidationError as exc:
        raise PydanticCustomError(
            "unrecognized_variant",
            "Input matches none of the expected variants",
            {"tried": exc.error_count()},
        ) from exc


def tagged_union(*variants: type[WireModel]) -> Any:
    """Union of models dispatched on their ``type`` literal."""
    return Annotated[Union[variants], Field(discriminator="type")]


def untagged_union(*variants: Any) -> Any:
    """Union whose variants are tried in the given order."""
    return Annotated[
        Union[variants],
        Field(union_mode="left_to_right"),
        WrapValidator(_reject_unmatched),
    ]


def open_enum(enum_cls: type[Enum]) -> Any:
    """
    String that maps onto ``enum_cls`` when it names a known member.

    Unknown names are kept verbatim, so agent specific operators survive a
    decode/encode cycle.
    """
    known = {member.value: member for member in enum_cls}

    def to_member(value: str) -> Union[Enum, str]:
        return known.get(value, value)

    def to_wire(value: Union[Enum, str]) -> str:
        return value.value if isinstance(value, Enum) else value

    return Annotated[
        str,
        AfterValidator(to_member),
        PlainSerializer(to_wire, return_type=str),
    ]
