"""
Capabilities types.

Returned by ``GET /capabilities``: what an agent supports, the JSON schema of
its configuration and the capabilities of each scalar type.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from ..core.base import (
    AggregateFunction,
    ComparisonOperator,
    JsonObject,
    JsonValue,
    ScalarType,
    StrictBool,
    UpdateOperator,
    WireModel,
)


class ColumnNullability(str, Enum):
    ONLY_NULLABLE = "only_nullable"
    NULLABLE_AND_NON_NULLABLE = "nullable_and_non_nullable"


class AtomicitySupportLevel(str, Enum):
    ROW = "row"
    SINGLE_OPERATION = "single_operation"
    HOMOGENEOUS_OPERATIONS = "homogeneous_operations"
    HETEROGENEOUS_OPERATIONS = "heterogeneous_operations"


class GraphQLType(str, Enum):
    """Built-in GraphQL scalar a custom scalar type is parsed as."""
    INT = "Int"
    FLOAT = "Float"
    STRING = "String"
    BOOLEAN = "Boolean"
    ID = "ID"


class SubqueryComparisonCapabilities(WireModel):
    # Does the agent support comparisons that involve related tables (ie. joins)?
    supports_relations: Optional[StrictBool] = None


class ComparisonCapabilities(WireModel):
    subquery: Optional[SubqueryComparisonCapabilities] = None


class DataSchemaCapabilities(WireModel):
    column_nullability: Optional[ColumnNullability] = None
    supports_foreign_keys: Optional[StrictBool] = None
    supports_primary_keys: Optional[StrictBool] = None
    supports_schemaless_tables: Optional[StrictBool] = None


class InsertCapabilities(WireModel):
    # Whether or not nested inserts to related tables are supported
    supports_nested_inserts: Optional[StrictBool] = None


class MutationCapabilities(WireModel):
    atomicity_support_level: Optional[AtomicitySupportLevel] = None
    delete: Optional[JsonValue] = None
    insert: Optional[InsertCapabilities] = None
    returning: Optional[JsonValue] = None
    update: Optional[JsonValue] = None


class QueryCapabilities(WireModel):
    foreach: Optional[JsonValue] = None


class UpdateColumnOperatorDefinition(WireModel):
    argument_type: ScalarType


class ScalarTypeCapabilities(WireModel):
    """
    Capabilities of a scalar type.

    - aggregate_functions: aggregate function name -> result scalar type
    - comparison_operators: comparison operator name -> argument scalar type
    - update_column_operators: update operator name -> definition
    - graphql_type: built-in GraphQL scalar used to parse values of this
      type. When absent any JSON value is accepted.

    All names must be valid GraphQL names and referenced types must be
    declared in the capabilities' ``scalar_types``.
    """
    aggregate_functions: Optional[dict[AggregateFunction, ScalarType]] = None
    comparison_operators: Optional[dict[ComparisonOperator, ScalarType]] = None
    graphql_type: Optional[GraphQLType] = None
    update_column_operators: Optional[dict[UpdateOperator, UpdateColumnOperatorDefinition]] = None


class Capabilities(WireModel):
    """Feature flags of an agent. Opaque sections are kept as raw JSON."""
    comparisons: Optional[ComparisonCapabilities] = None
    data_schema: Optional[DataSchemaCapabilities] = None
    datasets: Optional[JsonValue] = None
    explain: Optional[JsonValue] = None
    interpolated_queries: Optional[JsonValue] = None
    licensing: Optional[JsonValue] = None
    metrics: Optional[JsonValue] = None
    mutations: Optional[MutationCapabilities] = None
    queries: Optional[QueryCapabilities] = None
    raw: Optional[JsonValue] = None
    relationships: Optional[JsonValue] = None
    scalar_types: Optional[dict[ScalarType, ScalarTypeCapabilities]] = None
    subscriptions: Optional[JsonValue] = None
    user_defined_functions: Optional[JsonValue] = None
    post_schema_capabilities: Optional[JsonValue] = None

    def supports(self, section: str) -> bool:
        """Whether the agent advertises the named capability section."""
        if section not in type(self).model_fields:
            return False
        return getattr(self, section) is not None


class ConfigSchemaResponse(WireModel):
    """OpenAPI schema objects describing the agent's configuration."""
    config_schema: JsonObject
    other_schemas: dict[str, JsonObject]


class CapabilitiesResponse(WireModel):
    capabilities: Capabilities
    config_schemas: ConfigSchemaResponse
    display_name: Optional[str] = None
    release_name: Optional[str] = None
