"""Helpers over output schema nodes (JSON Schema shaped dicts)."""

from typing import Any, Optional


def is_of_type_or_contains(type_def: Any, type_name: str) -> bool:
    """Check whether a node's ``type`` is ``type_name`` or a list containing it."""
    if not type_def:
        return False
    if isinstance(type_def, str):
        return type_def == type_name
    if isinstance(type_def, list):
        return type_name in type_def
    return False


def with_nullability(node: dict, nullable: bool) -> dict:
    """Add or remove the ``"null"`` alternative on a node's ``type`` in place."""
    if "type" not in node:
        return node
    if nullable:
        node["type"] = add_null(node["type"])
    else:
        node["type"] = strip_null(node["type"])
    return node


def add_null(type_def: Any) -> Any:
    if isinstance(type_def, list):
        return type_def if "null" in type_def else [*type_def, "null"]
    return [type_def, "null"]


def strip_null(type_def: Any) -> Any:
    """Remove ``"null"`` from a type list, collapsing a single survivor."""
    if not isinstance(type_def, list):
        return type_def
    remaining = [t for t in type_def if t != "null"]
    if len(remaining) == 1:
        return remaining[0]
    return remaining


def properties_target(node: dict) -> Optional[dict]:
    """Return the object node that receives fields, looking through array items."""
    while node is not None:
        if "properties" in node:
            return node
        if "anyOf" in node:
            return None
        node = node.get("items")
    return None


def variants_target(node: dict) -> Optional[dict]:
    """Return the union node that receives variants, looking through array items."""
    while node is not None:
        if "anyOf" in node:
            return node
        if "properties" in node:
            return None
        node = node.get("items")
    return None


def is_container(node: dict) -> bool:
    """An object or union node (possibly inside arrays) still to be filled."""
    return properties_target(node) is not None or variants_target(node) is not None


def new_object(nullable: bool = False) -> dict:
    return {"type": ["object", "null"] if nullable else "object", "properties": {}}


def new_union() -> dict:
    return {"anyOf": []}
