"""
Query types.

``POST /query`` takes a QueryRequest and returns a QueryResponse.

Example request:
{
    "target": {"type": "table", "name": ["Album"]},
    "relationships": [],
    "query": {
        "fields": {
            "id": {"type": "column", "column": "AlbumId", "column_type": "number"}
        },
        "limit": 10,
        "where": {
            "type": "binary_op",
            "operator": "equal",
            "column": {"name": "ArtistId", "column_type": "number"},
            "value": {"type": "scalar", "value": 1, "value_type": "number"}
        }
    }
}
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import ConfigDict

from ..core.base import (
    AggregateFunction,
    ColumnName,
    FunctionName,
    JsonObject,
    JsonValue,
    ScalarType,
    StrictBool,
    StrictInt,
    TableName,
    UInt,
    WireModel,
    open_enum,
    tagged_union,
    untagged_union,
)


# =============================================================================
# Targets
# =============================================================================


class ScalarArgumentValue(WireModel):
    type: Literal["scalar"] = "scalar"
    value: JsonValue
    value_type: ScalarType


ArgumentValue = ScalarArgumentValue


class NamedArgument(WireModel):
    type: Literal["named"] = "named"
    name: str
    value: ArgumentValue


FunctionRequestArgument = NamedArgument


class TableTarget(WireModel):
    type: Literal["table"] = "table"
    name: TableName


class InterpolatedTarget(WireModel):
    type: Literal["interpolated"] = "interpolated"
    id: str


class FunctionTarget(WireModel):
    type: Literal["function"] = "function"
    name: FunctionName
    arguments: tuple[FunctionRequestArgument, ...]


Target = tagged_union(TableTarget, InterpolatedTarget, FunctionTarget)


class InterpolatedText(WireModel):
    type: Literal["text"] = "text"
    value: str


class InterpolatedScalar(WireModel):
    type: Literal["scalar"] = "scalar"
    value: JsonValue
    value_type: ScalarType


InterpolatedItem = tagged_union(InterpolatedText, InterpolatedScalar)


class InterpolatedQuery(WireModel):
    # Should be unique across the request
    id: str
    items: tuple[InterpolatedItem, ...]


class ScalarValue(WireModel):
    value: JsonValue
    value_type: ScalarType


# =============================================================================
# Relationships
# =============================================================================


class RelationshipType(str, Enum):
    OBJECT = "object"
    ARRAY = "array"


class Relationship(WireModel):
    # source column -> target column
    column_mapping: dict[ColumnName, ColumnName]
    relationship_type: RelationshipType
    target: Target


class TableRelationships(WireModel):
    """Relationships from ``source_table``, keyed by relationship name."""
    relationships: dict[str, Relationship]
    source_table: TableName


# =============================================================================
# Expressions
# =============================================================================


class UnaryComparisonOperator(str, Enum):
    IS_NULL = "is_null"


class BinaryComparisonOperator(str, Enum):
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL = "less_than_or_equal"
    EQUAL = "equal"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL = "greater_than_or_equal"


class BinaryArrayComparisonOperator(str, Enum):
    IN = "in"


# Agents may declare custom operators; unknown names are kept as strings
UnaryComparisonOperatorName = open_enum(UnaryComparisonOperator)
BinaryComparisonOperatorName = open_enum(BinaryComparisonOperator)
BinaryArrayComparisonOperatorName = open_enum(BinaryArrayComparisonOperator)

# A nested field path is tried before a plain column name
ColumnSelector = untagged_union(tuple[str, ...], str)


class ComparisonColumn(WireModel):
    column_type: ScalarType
    name: ColumnSelector
    # Missing or empty means the current table, ["$"] means the query table
    path: Optional[tuple[str, ...]] = None


class ColumnComparisonValue(WireModel):
    type: Literal["column"] = "column"
    column: ComparisonColumn


class ScalarComparisonValue(WireModel):
    type: Literal["scalar"] = "scalar"
    value: JsonValue
    value_type: ScalarType


ComparisonValue = tagged_union(ColumnComparisonValue, ScalarComparisonValue)


class RelatedTable(WireModel):
    type: Literal["related"] = "related"
    relationship: str


class UnrelatedTable(WireModel):
    type: Literal["unrelated"] = "unrelated"
    table: TableName


ExistsInTable = tagged_union(RelatedTable, UnrelatedTable)


class AndExpression(WireModel):
    type: Literal["and"] = "and"
    expressions: tuple[Expression, ...]


class OrExpression(WireModel):
    type: Literal["or"] = "or"
    expressions: tuple[Expression, ...]


class NotExpression(WireModel):
    type: Literal["not"] = "not"
    expression: Expression


class ApplyUnaryComparison(WireModel):
    type: Literal["unary_op"] = "unary_op"
    column: ComparisonColumn
    operator: UnaryComparisonOperatorName


class ApplyBinaryComparison(WireModel):
    type: Literal["binary_op"] = "binary_op"
    column: ComparisonColumn
    operator: BinaryComparisonOperatorName
    value: ComparisonValue


class ApplyBinaryArrayComparison(WireModel):
    type: Literal["binary_arr_op"] = "binary_arr_op"
    column: ComparisonColumn
    operator: BinaryArrayComparisonOperatorName
    value_type: ScalarType
    values: tuple[JsonValue, ...]


class ExistsExpression(WireModel):
    type: Literal["exists"] = "exists"
    in_table: ExistsInTable
    where: Expression


Expression = tagged_union(
    AndExpression,
    OrExpression,
    NotExpression,
    ApplyUnaryComparison,
    ApplyBinaryComparison,
    ApplyBinaryArrayComparison,
    ExistsExpression,
)


# =============================================================================
# Ordering
# =============================================================================


class OrderDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ColumnOrderByTarget(WireModel):
    type: Literal["column"] = "column"
    column: ColumnSelector


class SingleColumnAggregateOrderByTarget(WireModel):
    type: Literal["single_column_aggregate"] = "single_column_aggregate"
    column: ColumnName
    function: AggregateFunction
    result_type: ScalarType


class StarCountAggregateOrderByTarget(WireModel):
    type: Literal["star_count_aggregate"] = "star_count_aggregate"


OrderByTarget = tagged_union(
    ColumnOrderByTarget,
    SingleColumnAggregateOrderByTarget,
    StarCountAggregateOrderByTarget,
)


class OrderByElement(WireModel):
    order_direction: OrderDirection
    target: OrderByTarget
    # Relationship path to the table holding the target, non-empty for aggregates
    target_path: tuple[str, ...]


class OrderByRelation(WireModel):
    subrelations: dict[str, OrderByRelation]
    where: Optional[Expression] = None


class OrderBy(WireModel):
    """
    Ordering of a query.

    ``elements`` are in priority order. ``relations`` holds the relationships,
    keyed by name, that the elements' target paths traverse.
    """
    elements: tuple[OrderByElement, ...]
    relations: dict[str, OrderByRelation]


# =============================================================================
# Fields and aggregates
# =============================================================================


class ColumnCountAggregate(WireModel):
    type: Literal["column_count"] = "column_count"
    column: ColumnName
    # Whether or not only distinct items should be counted
    distinct: StrictBool


class SingleColumnAggregate(WireModel):
    type: Literal["single_column"] = "single_column"
    column: ColumnName
    function: AggregateFunction
    result_type: ScalarType


class StarCountAggregate(WireModel):
    type: Literal["star_count"] = "star_count"


Aggregate = tagged_union(ColumnCountAggregate, SingleColumnAggregate, StarCountAggregate)


class ColumnField(WireModel):
    type: Literal["column"] = "column"
    column: ColumnName
    column_type: ScalarType


class ObjectField(WireModel):
    type: Literal["object"] = "object"
    column: ColumnName
    query: Query


class ArrayField(WireModel):
    type: Literal["array"] = "array"
    field: Field
    limit: Optional[StrictInt] = None
    offset: Optional[StrictInt] = None
    where: Optional[OrderBy] = None


class RelationshipField(WireModel):
    type: Literal["relationship"] = "relationship"
    query: Query
    # The name of the relationship to follow for the subquery
    relationship: str


Field = tagged_union(ColumnField, ObjectField, ArrayField, RelationshipField)


class Query(WireModel):
    aggregates: Optional[dict[str, Aggregate]] = None
    # Limits the rows considered for aggregation, not the returned rows
    aggregates_limit: Optional[UInt] = None
    fields: Optional[dict[str, Field]] = None
    # Limits the returned rows, not the rows considered for aggregation
    limit: Optional[UInt] = None
    # Applies to both row and aggregation results
    offset: Optional[UInt] = None
    order_by: Optional[OrderBy] = None
    where: Optional[Expression] = None


class QueryRequest(WireModel):
    """
    A query against a target.

    When ``foreach`` is present the query is repeated for each entry, with its
    column values applied as an equality filter, and the agent answers with a
    ForEachResponse.
    """
    foreach: Optional[tuple[dict[ColumnName, ScalarValue], ...]] = None
    interpolated_queries: Optional[dict[str, InterpolatedQuery]] = None
    query: Query
    target: Target
    relationships: tuple[TableRelationships, ...]


# =============================================================================
# Responses
# =============================================================================


class ResponseRow(WireModel):
    """Single result set: aggregate results and rows keyed by field name."""
    model_config = ConfigDict(extra="forbid")

    aggregates: Optional[JsonObject] = None
    rows: Optional[tuple[dict[str, ResponseFieldValue], ...]] = None


# Relationship fields hold a nested result set, anything else is a column value
ResponseFieldValue = untagged_union(ResponseRow, JsonValue)


class ForEachRow(WireModel):
    model_config = ConfigDict(extra="forbid")

    query: ResponseRow


class ForEachResponse(WireModel):
    """One result set per ``foreach`` entry of the request, in order."""
    model_config = ConfigDict(extra="forbid")

    rows: tuple[ForEachRow, ...]


QueryResponse = untagged_union(ForEachResponse, ResponseRow)


for _model in (
    NamedArgument,
    AndExpression,
    OrExpression,
    NotExpression,
    ExistsExpression,
    OrderByRelation,
    ObjectField,
    ArrayField,
    RelationshipField,
    Query,
    QueryRequest,
    ResponseRow,
):
    _model.model_rebuild()
