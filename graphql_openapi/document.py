"""OpenAPI document skeleton and per-operation path entries."""

from typing import Optional

from .nodes import is_of_type_or_contains, new_object

OPENAPI_VERSION = "3.1.0"
NOT_SPECIFIED = "Not specified"


def new_document(info: Optional[dict] = None, servers: Optional[list[str]] = None) -> dict:
    """
    Create an empty OpenAPI document.

    Args:
        info: Overrides for the placeholder ``info`` block
        servers: Server URLs, defaults to ["/"]

    Returns:
        OpenAPI document with no paths
    """
    document_info = {
        "title": NOT_SPECIFIED,
        "license": {"name": NOT_SPECIFIED},
        "version": NOT_SPECIFIED,
    }
    document_info.update(info or {})
    return {
        "openapi": OPENAPI_VERSION,
        "info": document_info,
        "servers": [{"url": url} for url in (servers or ["/"])],
        "paths": {},
    }


def add_operation(document: dict, operation_name: str) -> dict:
    """
    Register ``GET /<operation_name>`` with an empty response object.

    Returns:
        The ``get`` operation entry; its response schema is filled in later
    """
    operation = {
        "parameters": [],
        "responses": {
            "200": {
                "description": "response",
                "content": {"application/json": {"schema": new_object()}},
            },
        },
    }
    document["paths"]["/" + operation_name] = {"get": operation}
    return operation


def response_schema(operation: dict) -> dict:
    return operation["responses"]["200"]["content"]["application/json"]["schema"]


def build_parameter(name: str, schema: dict) -> dict:
    """Build a query-string parameter from a flattened variable type."""
    type_def = schema.get("type")
    if is_of_type_or_contains(type_def, "object") or is_of_type_or_contains(type_def, "array"):
        parameter_schema = {
            key: schema[key] for key in ("type", "items", "properties") if key in schema
        }
    else:
        parameter_schema = {"type": type_def} if "type" in schema else {}

    parameter = {
        "name": name,
        "in": "query",
        "required": not is_of_type_or_contains(type_def, "null"),
        "schema": parameter_schema,
    }
    if schema.get("description"):
        parameter["description"] = schema["description"]
    return parameter


def add_parameter(operation: dict, name: str, schema: dict) -> dict:
    parameter = build_parameter(name, schema)
    operation["parameters"].append(parameter)
    return parameter
