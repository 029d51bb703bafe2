"""Shared wire payloads for the test suite."""

from __future__ import annotations

import copy

import pytest


QUERY_REQUEST = {
    "target": {"type": "table", "name": ["Chinook", "Album"]},
    "relationships": [
        {
            "source_table": ["Chinook", "Album"],
            "relationships": {
                "Artist": {
                    "relationship_type": "object",
                    "column_mapping": {"ArtistId": "ArtistId"},
                    "target": {"type": "table", "name": ["Chinook", "Artist"]},
                }
            },
        }
    ],
    "query": {
        "fields": {
            "id": {"type": "column", "column": "AlbumId", "column_type": "number"},
            "title": {"type": "column", "column": "Title", "column_type": "string"},
            "artist": {
                "type": "relationship",
                "relationship": "Artist",
                "query": {
                    "fields": {
                        "name": {"type": "column", "column": "Name", "column_type": "string"}
                    }
                },
            },
        },
        "aggregates": {"count": {"type": "star_count"}},
        "limit": 10,
        "offset": 5,
        "where": {
            "type": "and",
            "expressions": [
                {
                    "type": "binary_op",
                    "operator": "greater_than",
                    "column": {"name": "AlbumId", "column_type": "number"},
                    "value": {"type": "scalar", "value": 3, "value_type": "number"},
                },
                {
                    "type": "not",
                    "expression": {
                        "type": "unary_op",
                        "operator": "is_null",
                        "column": {"name": "Title", "column_type": "string"},
                    },
                },
                {
                    "type": "exists",
                    "in_table": {"type": "related", "relationship": "Artist"},
                    "where": {
                        "type": "binary_arr_op",
                        "operator": "in",
                        "column": {"name": "Name", "column_type": "string", "path": ["$"]},
                        "value_type": "string",
                        "values": ["AC/DC", "Accept"],
                    },
                },
            ],
        },
        "order_by": {
            "relations": {},
            "elements": [
                {
                    "order_direction": "desc",
                    "target_path": [],
                    "target": {"type": "column", "column": "Title"},
                }
            ],
        },
    },
}


CAPABILITIES_RESPONSE = {
    "display_name": "Chinook SQLite",
    "capabilities": {
        "data_schema": {
            "supports_primary_keys": True,
            "supports_foreign_keys": True,
            "column_nullability": "nullable_and_non_nullable",
        },
        "queries": {"foreach": {}},
        "relationships": {},
        "comparisons": {"subquery": {"supports_relations": True}},
        "mutations": {
            "insert": {"supports_nested_inserts": True},
            "update": {},
            "delete": {},
            "returning": {},
            "atomicity_support_level": "heterogeneous_operations",
        },
        "explain": {},
        "raw": {},
        "scalar_types": {
            "number": {
                "graphql_type": "Float",
                "comparison_operators": {"_gt": "number"},
                "aggregate_functions": {"max": "number", "sum": "number"},
                "update_column_operators": {"inc": {"argument_type": "number"}},
            },
            "string": {"graphql_type": "String"},
        },
    },
    "config_schemas": {
        "config_schema": {
            "type": "object",
            "required": ["db"],
            "properties": {"db": {"type": "string"}},
        },
        "other_schemas": {},
    },
}


SCHEMA_RESPONSE = {
    "tables": [
        {
            "name": ["Chinook", "Album"],
            "type": "table",
            "primary_key": ["AlbumId"],
            "description": "Collection of music albums",
            "insertable": True,
            "updatable": True,
            "deletable": False,
            "foreign_keys": {
                "Artist": {
                    "column_mapping": {"ArtistId": "ArtistId"},
                    "foreign_table": ["Chinook", "Artist"],
                }
            },
            "columns": [
                {
                    "name": "AlbumId",
                    "type": "number",
                    "nullable": False,
                    "value_generated": {"type": "auto_increment"},
                },
                {"name": "Title", "type": "string", "nullable": False, "updatable": True},
                {
                    "name": "Tags",
                    "type": {"type": "array", "element_type": "string", "nullable": True},
                    "nullable": True,
                },
                {
                    "name": "Meta",
                    "type": {"type": "object", "name": "AlbumMeta"},
                    "nullable": True,
                },
            ],
        }
    ],
    "object_types": [
        {
            "name": "AlbumMeta",
            "columns": [{"name": "label", "type": "string", "nullable": True}],
        }
    ],
    "functions": [
        {
            "name": ["search_albums"],
            "type": "read",
            "response_cardinality": "many",
            "returns": {"type": "table", "table": ["Chinook", "Album"]},
            "args": [{"name": "term", "type": "string", "optional": False}],
        }
    ],
}


MUTATION_REQUEST = {
    "insert_schema": [
        {
            "table": ["Artist"],
            "primary_key": ["ArtistId"],
            "fields": {
                "ArtistId": {
                    "type": "column",
                    "column": "ArtistId",
                    "column_type": "number",
                    "nullable": False,
                    "value_generated": {"type": "auto_increment"},
                },
                "Name": {
                    "type": "column",
                    "column": "Name",
                    "column_type": "string",
                    "nullable": True,
                },
                "Albums": {"type": "array_relation", "relationship": "Albums"},
            },
        }
    ],
    "operations": [
        {
            "type": "insert",
            "table": ["Artist"],
            "rows": [{"Name": "Gojira"}],
            "returning_fields": {
                "ArtistId": {"type": "column", "column": "ArtistId", "column_type": "number"}
            },
        },
        {
            "type": "update",
            "table": ["Artist"],
            "updates": [
                {
                    "type": "custom_operator",
                    "column": "Plays",
                    "operator_name": "inc",
                    "value": 1,
                    "value_type": "number",
                }
            ],
            "where": {
                "type": "binary_op",
                "operator": "equal",
                "column": {"name": "Name", "column_type": "string"},
                "value": {"type": "scalar", "value": "Gojira", "value_type": "string"},
            },
        },
        {"type": "delete", "table": ["Artist"]},
    ],
    "relationships": [],
}


@pytest.fixture
def query_request_payload() -> dict:
    return copy.deepcopy(QUERY_REQUEST)


@pytest.fixture
def capabilities_payload() -> dict:
    return copy.deepcopy(CAPABILITIES_RESPONSE)


@pytest.fixture
def schema_payload() -> dict:
    return copy.deepcopy(SCHEMA_RESPONSE)


@pytest.fixture
def mutation_payload() -> dict:
    return copy.deepcopy(MUTATION_REQUEST)
