"""GraphQL parsing, validation and schema construction."""

from typing import Union

from graphql import (
    DocumentNode,
    GraphQLError,
    GraphQLSchema,
    Source,
    build_client_schema,
    build_schema,
    parse,
    validate,
)


def build_schema_from_sdl(sdl: Union[str, Source]) -> GraphQLSchema:
    """
    Build GraphQL schema from schema definition language.

    Raises:
        GraphQLError: If the SDL is invalid
    """
    return build_schema(sdl)


def build_schema_from_introspection(introspection: dict) -> GraphQLSchema:
    """
    Build the converter's schema from an introspection result.

    A result still wrapped in a GraphQL response envelope (``{"data": ...}``)
    is unwrapped first.

    Raises:
        TypeError, KeyError: If the introspection result is malformed
    """
    data = introspection.get("data", introspection)
    if not isinstance(data, dict) or "__schema" not in data:
        data = introspection
    return build_client_schema(data)


def parse_query(source: Union[str, Source]) -> DocumentNode:
    """Parse the query document to translate; syntax errors raise GraphQLSyntaxError."""
    return parse(source)


def validate_query(doc: DocumentNode, schema: GraphQLSchema) -> list[GraphQLError]:
    """Every validation error of the query against the converter's schema."""
    return validate(schema, doc)
