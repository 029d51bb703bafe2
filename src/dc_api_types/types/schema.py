"""
Schema types.

``POST /schema`` takes a SchemaRequest and returns the tables, functions and
object types an agent exposes.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from ..core.base import (
    ColumnName,
    FunctionName,
    ScalarType,
    StrictBool,
    TableName,
    WireModel,
    tagged_union,
    untagged_union,
)


class DetailLevel(str, Enum):
    """
    How much information to return about the schema.

    - everything: all information about the schema
    - basic_info: tables and functions report only their name and type
    """
    EVERYTHING = "everything"
    BASIC_INFO = "basic_info"


class FunctionResponseCardinality(str, Enum):
    ONE = "one"
    MANY = "many"


class FunctionType(str, Enum):
    READ = "read"
    WRITE = "write"


class TableType(str, Enum):
    TABLE = "table"
    VIEW = "view"


class SchemaFilters(WireModel):
    only_functions: Optional[tuple[FunctionName, ...]] = None
    only_tables: Optional[tuple[TableName, ...]] = None


class SchemaRequest(WireModel):
    detail_level: Optional[DetailLevel] = None
    filters: Optional[SchemaFilters] = None


# --- Column types ---

class ObjectColumnType(WireModel):
    type: Literal["object"] = "object"
    name: str


class ArrayColumnType(WireModel):
    type: Literal["array"] = "array"
    element_type: ColumnType
    nullable: StrictBool


ColumnTypeNonScalar = tagged_union(ObjectColumnType, ArrayColumnType)

# Non-scalar shapes are tried before falling back to a scalar type name
ColumnType = untagged_union(ColumnTypeNonScalar, ScalarType)


class AutoIncrement(WireModel):
    type: Literal["auto_increment"] = "auto_increment"


class DefaultValue(WireModel):
    type: Literal["default_value"] = "default_value"


class UniqueIdentifier(WireModel):
    type: Literal["unique_identifier"] = "unique_identifier"


ColumnValueGenerationStrategy = tagged_union(AutoIncrement, DefaultValue, UniqueIdentifier)


class ColumnInfo(WireModel):
    description: Optional[str] = None
    insertable: Optional[StrictBool] = None
    name: ColumnName
    nullable: StrictBool
    type: ColumnType
    updatable: Optional[StrictBool] = None
    value_generated: Optional[ColumnValueGenerationStrategy] = None


class ObjectTypeDefinition(WireModel):
    columns: tuple[ColumnInfo, ...]
    description: Optional[str] = None
    name: str


class Constraint(WireModel):
    """Foreign key constraint: local column -> column of ``foreign_table``."""
    column_mapping: dict[ColumnName, ColumnName]
    foreign_table: TableName


class TableInfo(WireModel):
    columns: Optional[tuple[ColumnInfo, ...]] = None
    deletable: Optional[StrictBool] = None
    description: Optional[str] = None
    foreign_keys: Optional[dict[str, Constraint]] = None
    insertable: Optional[StrictBool] = None
    name: TableName
    primary_key: Optional[tuple[ColumnName, ...]] = None
    type: Optional[TableType] = None
    updatable: Optional[StrictBool] = None


# --- Functions ---

class FunctionInformationArgument(WireModel):
    name: str
    # If the argument can be omitted
    optional: Optional[StrictBool] = None
    type: ScalarType


class TableReturnType(WireModel):
    type: Literal["table"] = "table"
    table: TableName


class UnknownReturnType(WireModel):
    type: Literal["unknown"] = "unknown"


FunctionReturnType = tagged_union(TableReturnType, UnknownReturnType)


class FunctionInfo(WireModel):
    args: Optional[tuple[FunctionInformationArgument, ...]] = None
    description: Optional[str] = None
    name: FunctionName
    response_cardinality: Optional[FunctionResponseCardinality] = None
    returns: Optional[FunctionReturnType] = None
    type: FunctionType


class SchemaResponse(WireModel):
    object_types: Optional[tuple[ObjectTypeDefinition, ...]] = None
    tables: tuple[TableInfo, ...]
    functions: Optional[tuple[FunctionInfo, ...]] = None

    def table(self, name: TableName) -> Optional[TableInfo]:
        """Find a table by its fully qualified name."""
        wanted = tuple(name)
        for table in self.tables:
            if table.name == wanted:
                return table
        return None


ArrayColumnType.model_rebuild()
