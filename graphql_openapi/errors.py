"""Exceptions raised while translating GraphQL queries."""

from typing import Optional


class GraphQLOpenAPIError(Exception):
    """Base class for all translation errors."""


class MissingSchemaError(GraphQLOpenAPIError):
    """Neither SDL text nor an introspection result was supplied."""


class NoOperationNameError(GraphQLOpenAPIError):
    """An operation in the query has no name, so no path can be built for it."""

    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.line = line


class UnknownScalarError(GraphQLOpenAPIError):
    """A custom scalar has no mapping and the fallback resolver declined it."""

    def __init__(self, scalar_name: str):
        super().__init__(f"Unknown scalar: {scalar_name}")
        self.scalar_name = scalar_name


class DepthLimitExceededError(GraphQLOpenAPIError):
    """Input type recursion went deeper than the allowed limit."""

    def __init__(self, depth: int):
        super().__init__(f"depth limit exceeded: {depth}")
        self.depth = depth
