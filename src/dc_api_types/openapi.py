"""
OpenAPI document generator for the Data Connector types.

Generates:
- ``components.schemas`` for every registered type
- ``paths`` for the agent endpoints, referencing those components

The output is meant to be diffed against the upstream dc-api-types document
after it changes.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import yaml
from pydantic import TypeAdapter

from .core.registry import ENDPOINT_TYPES, TypeRegistry, default_registry

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.0.0"
REF_TEMPLATE = "#/components/schemas/{model}"


def component_ref(name: str) -> dict[str, str]:
    return {"$ref": REF_TEMPLATE.format(model=name)}


def generate_components(registry: TypeRegistry) -> dict[str, Any]:
    """
    Build the ``components.schemas`` mapping.

    Models and enums land in pydantic's ``$defs`` under their class name;
    union aliases are added under their registered name.
    """
    inputs = [
        (name, "validation", TypeAdapter(tp))
        for name, tp in registry.items()
    ]
    key_schemas, top_level = TypeAdapter.json_schemas(inputs, ref_template=REF_TEMPLATE)
    schemas: dict[str, Any] = dict(top_level.get("$defs", {}))

    for (name, _mode), schema in key_schemas.items():
        if schema.get("$ref") == REF_TEMPLATE.format(model=name):
            continue
        if name in schemas and schemas[name] != schema:
            logger.warning(f"Component name collision for '{name}', keeping the alias schema")
        schemas[name] = schema

    return dict(sorted(schemas.items()))


def generate_paths() -> dict[str, Any]:
    """Build the ``paths`` mapping of the agent endpoints."""
    paths: dict[str, Any] = {}
    for endpoint, (request_name, response_name) in ENDPOINT_TYPES.items():
        operation: dict[str, Any] = {
            "responses": {
                "200": {
                    "description": f"{endpoint} response",
                    "content": {"application/json": {"schema": component_ref(response_name)}},
                },
                "default": {
                    "description": "error",
                    "content": {"application/json": {"schema": component_ref("ErrorResponse")}},
                },
            }
        }
        if request_name is None:
            paths[f"/{endpoint}"] = {"get": operation}
        else:
            operation["requestBody"] = {
                "required": True,
                "content": {"application/json": {"schema": component_ref(request_name)}},
            }
            paths[f"/{endpoint}"] = {"post": operation}

    paths["/health"] = {"get": {"responses": {"204": {"description": "agent is healthy"}}}}
    return paths


def generate_openapi(
    registry: Optional[TypeRegistry] = None,
    title: str = "Hasura GraphQL Data Connector Agent API",
    version: str = "0.1.0",
) -> dict[str, Any]:
    """
    Generate the OpenAPI document.

    Args:
        registry: Types to include (default: every wire type)
        title: ``info.title``
        version: ``info.version``

    Returns:
        OpenAPI document as a dict
    """
    registry = registry or default_registry()
    components = generate_components(registry)
    logger.debug(f"Generated {len(components)} component schemas")
    return {
        "openapi": OPENAPI_VERSION,
        "info": {"title": title, "version": version},
        "paths": generate_paths(),
        "components": {"schemas": components},
    }


def render(document: dict[str, Any], fmt: str = "json") -> str:
    """Render the document as JSON or YAML text."""
    if fmt == "yaml":
        return yaml.safe_dump(document, default_flow_style=False, sort_keys=False)
    if fmt == "json":
        return json.dumps(document, indent=2)
    raise ValueError(f"Unsupported format '{fmt}' (expected json or yaml)")
