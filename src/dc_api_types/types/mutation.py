"""
Mutation types.

``POST /mutation`` takes a MutationRequest and returns a MutationResponse with
one result per operation, in request order.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from ..core.base import (
    ColumnName,
    JsonObject,
    JsonValue,
    ScalarType,
    StrictBool,
    TableName,
    UInt,
    UpdateOperator,
    WireModel,
    tagged_union,
)
from .query import Expression, Field, ResponseFieldValue, TableRelationships
from .schema import ColumnType, ColumnValueGenerationStrategy


class ObjectRelationInsertionOrder(str, Enum):
    BEFORE_PARENT = "before_parent"
    AFTER_PARENT = "after_parent"


class ArrayRelationInsertSchema(WireModel):
    type: Literal["array_relation"] = "array_relation"
    # The array relationship over which the related rows must be inserted
    relationship: str


class ColumnInsertSchema(WireModel):
    type: Literal["column"] = "column"
    column: ColumnName
    column_type: ColumnType
    nullable: StrictBool
    value_generated: Optional[ColumnValueGenerationStrategy] = None


class ObjectRelationInsertSchema(WireModel):
    type: Literal["object_relation"] = "object_relation"
    insertion_order: ObjectRelationInsertionOrder
    # The object relationship over which the related row must be inserted
    relationship: str


InsertFieldSchema = tagged_union(
    ArrayRelationInsertSchema,
    ColumnInsertSchema,
    ObjectRelationInsertSchema,
)


class TableInsertSchema(WireModel):
    """How to interpret insert row data for ``table``, keyed by row field name."""
    fields: dict[str, InsertFieldSchema]
    primary_key: Optional[tuple[ColumnName, ...]] = None
    table: TableName


class CustomUpdateColumnOperatorRowUpdate(WireModel):
    type: Literal["custom_operator"] = "custom_operator"
    column: ColumnName
    operator_name: UpdateOperator
    value: JsonValue
    value_type: ScalarType


class SetColumnRowUpdate(WireModel):
    type: Literal["set"] = "set"
    column: ColumnName
    value: JsonObject
    value_type: ScalarType


RowUpdate = tagged_union(CustomUpdateColumnOperatorRowUpdate, SetColumnRowUpdate)


class DeleteMutationOperation(WireModel):
    type: Literal["delete"] = "delete"
    returning_fields: Optional[dict[str, Field]] = None
    table: TableName
    where: Optional[Expression] = None


class InsertMutationOperation(WireModel):
    type: Literal["insert"] = "insert"
    post_insert_check: Optional[Expression] = None
    returning_fields: Optional[dict[str, Field]] = None
    rows: tuple[JsonObject, ...]
    table: TableName


class UpdateMutationOperation(WireModel):
    type: Literal["update"] = "update"
    post_update_check: Optional[Expression] = None
    returning_fields: Optional[dict[str, Field]] = None
    table: TableName
    updates: tuple[RowUpdate, ...]
    where: Optional[Expression] = None


MutationOperation = tagged_union(
    DeleteMutationOperation,
    InsertMutationOperation,
    UpdateMutationOperation,
)


class MutationRequest(WireModel):
    insert_schema: tuple[TableInsertSchema, ...]
    operations: tuple[MutationOperation, ...]
    relationships: tuple[TableRelationships, ...]


class MutationOperationResults(WireModel):
    affected_rows: UInt
    returning: Optional[tuple[dict[str, ResponseFieldValue], ...]] = None


class MutationResponse(WireModel):
    operation_results: tuple[MutationOperationResults, ...]
