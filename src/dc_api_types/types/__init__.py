"""
Native types for every object of the Data Connector OpenAPI document.
"""

from __future__ import annotations

from .capabilities import (
    AtomicitySupportLevel,
    Capabilities,
    CapabilitiesResponse,
    ColumnNullability,
    ComparisonCapabilities,
    ConfigSchemaResponse,
    DataSchemaCapabilities,
    GraphQLType,
    InsertCapabilities,
    MutationCapabilities,
    QueryCapabilities,
    ScalarTypeCapabilities,
    SubqueryComparisonCapabilities,
    UpdateColumnOperatorDefinition,
)
from .error import ErrorResponse, ErrorResponseType
from .explain import ExplainResponse
from .mutation import (
    ArrayRelationInsertSchema,
    ColumnInsertSchema,
    CustomUpdateColumnOperatorRowUpdate,
    DeleteMutationOperation,
    InsertFieldSchema,
    InsertMutationOperation,
    MutationOperation,
    MutationOperationResults,
    MutationRequest,
    MutationResponse,
    ObjectRelationInsertionOrder,
    ObjectRelationInsertSchema,
    RowUpdate,
    SetColumnRowUpdate,
    TableInsertSchema,
    UpdateMutationOperation,
)
from .query import (
    Aggregate,
    AndExpression,
    ApplyBinaryArrayComparison,
    ApplyBinaryComparison,
    ApplyUnaryComparison,
    ArgumentValue,
    ArrayField,
    BinaryArrayComparisonOperator,
    BinaryComparisonOperator,
    ColumnComparisonValue,
    ColumnCountAggregate,
    ColumnField,
    ColumnOrderByTarget,
    ColumnSelector,
    ComparisonColumn,
    ComparisonValue,
    ExistsExpression,
    ExistsInTable,
    Expression,
    Field,
    ForEachResponse,
    ForEachRow,
    FunctionRequestArgument,
    FunctionTarget,
    InterpolatedItem,
    InterpolatedQuery,
    InterpolatedScalar,
    InterpolatedTarget,
    InterpolatedText,
    NamedArgument,
    NotExpression,
    ObjectField,
    OrderBy,
    OrderByElement,
    OrderByRelation,
    OrderByTarget,
    OrderDirection,
    OrExpression,
    Query,
    QueryRequest,
    QueryResponse,
    RelatedTable,
    Relationship,
    RelationshipField,
    RelationshipType,
    ResponseFieldValue,
    ResponseRow,
    ScalarArgumentValue,
    ScalarComparisonValue,
    ScalarValue,
    SingleColumnAggregate,
    SingleColumnAggregateOrderByTarget,
    StarCountAggregate,
    StarCountAggregateOrderByTarget,
    TableRelationships,
    TableTarget,
    Target,
    UnaryComparisonOperator,
    UnrelatedTable,
)
from .raw import RawRequest, RawResponse
from .schema import (
    ArrayColumnType,
    AutoIncrement,
    ColumnInfo,
    ColumnType,
    ColumnTypeNonScalar,
    ColumnValueGenerationStrategy,
    Constraint,
    DefaultValue,
    DetailLevel,
    FunctionInfo,
    FunctionInformationArgument,
    FunctionResponseCardinality,
    FunctionReturnType,
    FunctionType,
    ObjectColumnType,
    ObjectTypeDefinition,
    SchemaFilters,
    SchemaRequest,
    SchemaResponse,
    TableInfo,
    TableReturnType,
    TableType,
    UniqueIdentifier,
    UnknownReturnType,
)

__all__ = [
    # Capabilities
    "AtomicitySupportLevel",
    "Capabilities",
    "CapabilitiesResponse",
    "ColumnNullability",
    "ComparisonCapabilities",
    "ConfigSchemaResponse",
    "DataSchemaCapabilities",
    "GraphQLType",
    "InsertCapabilities",
    "MutationCapabilities",
    "QueryCapabilities",
    "ScalarTypeCapabilities",
    "SubqueryComparisonCapabilities",
    "UpdateColumnOperatorDefinition",
    # Schema
    "ArrayColumnType",
    "AutoIncrement",
    "ColumnInfo",
    "ColumnType",
    "ColumnTypeNonScalar",
    "ColumnValueGenerationStrategy",
    "Constraint",
    "DefaultValue",
    "DetailLevel",
    "FunctionInfo",
    "FunctionInformationArgument",
    "FunctionResponseCardinality",
    "FunctionReturnType",
    "FunctionType",
    "ObjectColumnType",
    "ObjectTypeDefinition",
    "SchemaFilters",
    "SchemaRequest",
    "SchemaResponse",
    "TableInfo",
    "TableReturnType",
    "TableType",
    "UniqueIdentifier",
    "UnknownReturnType",
    # Query
    "Aggregate",
    "AndExpression",
    "ApplyBinaryArrayComparison",
    "ApplyBinaryComparison",
    "ApplyUnaryComparison",
    "ArgumentValue",
    "ArrayField",
    "BinaryArrayComparisonOperator",
    "BinaryComparisonOperator",
    "ColumnComparisonValue",
    "ColumnCountAggregate",
    "ColumnField",
    "ColumnOrderByTarget",
    "ColumnSelector",
    "ComparisonColumn",
    "ComparisonValue",
    "ExistsExpression",
    "ExistsInTable",
    "Expression",
    "Field",
    "ForEachResponse",
    "ForEachRow",
    "FunctionRequestArgument",
    "FunctionTarget",
    "InterpolatedItem",
    "InterpolatedQuery",
    "InterpolatedScalar",
    "InterpolatedTarget",
    "InterpolatedText",
    "NamedArgument",
    "NotExpression",
    "ObjectField",
    "OrderBy",
    "OrderByElement",
    "OrderByRelation",
    "OrderByTarget",
    "OrderDirection",
    "OrExpression",
    "Query",
    "QueryRequest",
    "QueryResponse",
    "RelatedTable",
    "Relationship",
    "RelationshipField",
    "RelationshipType",
    "ResponseFieldValue",
    "ResponseRow",
    "ScalarArgumentValue",
    "ScalarComparisonValue",
    "ScalarValue",
    "SingleColumnAggregate",
    "SingleColumnAggregateOrderByTarget",
    "StarCountAggregate",
    "StarCountAggregateOrderByTarget",
    "TableRelationships",
    "TableTarget",
    "Target",
    "UnaryComparisonOperator",
    "UnrelatedTable",
    # Mutation
    "ArrayRelationInsertSchema",
    "ColumnInsertSchema",
    "CustomUpdateColumnOperatorRowUpdate",
    "DeleteMutationOperation",
    "InsertFieldSchema",
    "InsertMutationOperation",
    "MutationOperation",
    "MutationOperationResults",
    "MutationRequest",
    "MutationResponse",
    "ObjectRelationInsertionOrder",
    "ObjectRelationInsertSchema",
    "RowUpdate",
    "SetColumnRowUpdate",
    "TableInsertSchema",
    "UpdateMutationOperation",
    # Raw, explain, errors
    "RawRequest",
    "RawResponse",
    "ExplainResponse",
    "ErrorResponse",
    "ErrorResponseType",
]
