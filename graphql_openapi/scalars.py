"""Scalar type resolution."""

import copy
import logging
from typing import Callable, Optional

from .errors import UnknownScalarError

logger = logging.getLogger(__name__)

# GraphQL builtin scalar -> JSON Schema primitive
BUILTIN_SCALARS = {
    "ID": "string",
    "String": "string",
    "Int": "integer",
    "Float": "number",
    "Boolean": "boolean",
}

ScalarFallback = Callable[[str], Optional[dict]]


def _decline(scalar_name: str) -> None:
    return None


class ScalarResolver:
    """
    Map GraphQL scalar names to output schema nodes.

    Builtin scalars have fixed mappings. Any other scalar is looked up in
    ``cache`` and, on a miss, handed to ``fallback``; a truthy answer is cached.
    The cache is shared by every call made through this resolver, so callers
    translating concurrently should give each call its own cache.
    """

    def __init__(self, cache: Optional[dict] = None, fallback: Optional[ScalarFallback] = None):
        self.cache = cache if cache is not None else {}
        self.fallback = fallback or _decline

    def resolve(self, scalar_name: str) -> dict:
        """
        Resolve a scalar name to a fresh output node.

        Args:
            scalar_name: GraphQL scalar type name

        Returns:
            A copy of the mapped node, safe for the caller to mutate

        Raises:
            UnknownScalarError: If the scalar is unknown and the fallback declines it
        """
        if scalar_name in BUILTIN_SCALARS:
            return {"type": BUILTIN_SCALARS[scalar_name]}

        if self.cache.get(scalar_name):
            return copy.deepcopy(self.cache[scalar_name])

        logger.debug("Scalar cache miss for %s", scalar_name)
        resolved = self.fallback(scalar_name)
        if not resolved:
            raise UnknownScalarError(scalar_name)

        self.cache[scalar_name] = resolved
        return copy.deepcopy(resolved)


def fixed_type_fallback(primitive: str) -> ScalarFallback:
    """Build a fallback that maps every unknown scalar to ``primitive``."""

    def fallback(scalar_name: str) -> dict:
        return {"type": primitive}

    return fallback
