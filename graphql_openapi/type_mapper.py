"""Conversion of GraphQL types into output schema nodes."""

from graphql import (
    GraphQLEnumType,
    GraphQLField,
    GraphQLInputObjectType,
    GraphQLInputType,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLOutputType,
    GraphQLScalarType,
    GraphQLUnionType,
)

from .errors import DepthLimitExceededError
from .nodes import new_object, new_union, strip_null, with_nullability
from .scalars import BUILTIN_SCALARS, ScalarResolver

MAX_INPUT_DEPTH = 50


def map_field_type(field_def: GraphQLField, resolver: ScalarResolver) -> dict:
    """
    Map the type of a selected field to an output node.

    Objects and unions come back empty; the traversal fills them in as the
    field's selection set is visited.

    Args:
        field_def: Field definition currently under the type cursor
        resolver: Scalar resolver for custom scalars

    Returns:
        Output schema node for the field
    """
    node = output_type_node(field_def.type, resolver)
    if field_def.description:
        node["description"] = field_def.description
    return node


def output_type_node(graphql_type: GraphQLOutputType, resolver: ScalarResolver) -> dict:
    """Map an output type; nullable unless wrapped in non-null."""
    nullable = True
    if isinstance(graphql_type, GraphQLNonNull):
        nullable = False
        graphql_type = graphql_type.of_type

    if isinstance(graphql_type, GraphQLList):
        node = {"type": "array", "items": output_type_node(graphql_type.of_type, resolver)}
    elif isinstance(graphql_type, (GraphQLObjectType, GraphQLInterfaceType)):
        node = new_object()
    elif isinstance(graphql_type, GraphQLUnionType):
        return new_union()
    elif isinstance(graphql_type, GraphQLEnumType):
        node = {"type": "string", "enum": list(graphql_type.values)}
    else:
        node = resolver.resolve(graphql_type.name)

    return with_nullability(node, nullable)


def map_input_type(input_type: GraphQLInputType, resolver: ScalarResolver, depth: int = 0) -> dict:
    """
    Flatten a variable's input type into an output node.

    Everything is nullable until a non-null wrapper strips the ``"null"``
    alternative. Custom scalars are returned as resolved, without nullability.

    Args:
        input_type: GraphQL input type of the variable
        resolver: Scalar resolver for custom scalars
        depth: Current recursion depth

    Returns:
        Output schema node

    Raises:
        DepthLimitExceededError: If nesting exceeds MAX_INPUT_DEPTH
    """
    if depth > MAX_INPUT_DEPTH:
        raise DepthLimitExceededError(depth)

    if isinstance(input_type, GraphQLNonNull):
        node = map_input_type(input_type.of_type, resolver, depth + 1)
        if "type" in node:
            node["type"] = strip_null(node["type"])
        return node

    if isinstance(input_type, GraphQLInputObjectType):
        properties = {}
        for name, field in input_type.fields.items():
            properties[name] = map_input_type(field.type, resolver, depth + 1)
            if field.description:
                properties[name]["description"] = field.description
        node = {"type": ["object", "null"], "properties": properties}
        if input_type.description:
            node["description"] = input_type.description
        return node

    if isinstance(input_type, GraphQLList):
        return {
            "type": ["array", "null"],
            "items": map_input_type(input_type.of_type, resolver, depth + 1),
        }

    if isinstance(input_type, GraphQLEnumType):
        node = {"type": ["string", "null"], "enum": list(input_type.values)}
        if input_type.description:
            node["description"] = input_type.description
        return node

    if isinstance(input_type, GraphQLScalarType):
        if input_type.name in BUILTIN_SCALARS:
            return {"type": [BUILTIN_SCALARS[input_type.name], "null"]}
        return resolver.resolve(input_type.name)

    raise TypeError(f"Unexpected input type: {input_type}")
