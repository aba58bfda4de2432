"""Per-call traversal state: selection frames and named fragments."""

import copy
import logging
from dataclasses import dataclass, field
from typing import Optional

from graphql import Node

from .errors import NoOperationNameError

logger = logging.getLogger(__name__)


@dataclass
class Frame:
    """An open selection set and the node being filled in for it."""

    source: Node
    schema: dict


class SelectionStack:
    """
    Stack of open selection frames.

    The top frame is always the innermost selection set being visited. Frames
    are matched to AST nodes by identity; the walk never replaces nodes.
    """

    def __init__(self):
        self._frames: list[Frame] = []

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def top(self) -> Frame:
        if not self._frames:
            raise IndexError("selection stack is empty")
        return self._frames[-1]

    def push(self, source: Node, schema: dict) -> None:
        logger.debug("push %s (depth %d)", source.kind, len(self._frames) + 1)
        self._frames.append(Frame(source, schema))

    def pop(self) -> dict:
        frame = self._frames.pop()
        logger.debug("pop %s (depth %d)", frame.source.kind, len(self._frames))
        return frame.schema

    def is_top(self, source: Node) -> bool:
        return bool(self._frames) and self._frames[-1].source is source


class FragmentTable:
    """Finished fragment nodes by name; lookups hand out deep copies."""

    def __init__(self):
        self._fragments: dict[str, dict] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._fragments

    def __len__(self) -> int:
        return len(self._fragments)

    def add(self, name: str, schema: dict) -> None:
        logger.debug("Registered fragment %s", name)
        self._fragments[name] = schema

    def get(self, name: str) -> dict:
        return copy.deepcopy(self._fragments[name])


@dataclass
class TraversalState:
    """Everything one translation call mutates while walking the query."""

    document: dict
    stack: SelectionStack = field(default_factory=SelectionStack)
    fragments: FragmentTable = field(default_factory=FragmentTable)
    operation: Optional[dict] = None
    error: Optional[NoOperationNameError] = None

    @property
    def stopped(self) -> bool:
        return self.error is not None

    def current_schema(self) -> dict:
        return self.stack.top.schema
