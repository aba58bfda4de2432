"""Describe GraphQL query documents as OpenAPI 3.1 GET endpoints."""

from .converter import ConversionResult, GraphQLToOpenAPIConverter
from .errors import (
    DepthLimitExceededError,
    GraphQLOpenAPIError,
    MissingSchemaError,
    NoOperationNameError,
    UnknownScalarError,
)

__version__ = "0.1.0"

__all__ = [
    "ConversionResult",
    "DepthLimitExceededError",
    "GraphQLOpenAPIError",
    "GraphQLToOpenAPIConverter",
    "MissingSchemaError",
    "NoOperationNameError",
    "UnknownScalarError",
]
