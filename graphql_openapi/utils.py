"""Utility functions for file handling and GraphQL AST locations."""

import hashlib
import json
from pathlib import Path
from typing import Any

from graphql import Node


# File system utilities
def ensure_dir(path: str) -> None:
    """Ensure directory exists, creating it if necessary."""
    Path(path).mkdir(parents=True, exist_ok=True)


def exists(path: str) -> bool:
    """Check if file exists."""
    return Path(path).exists()


def dirname(path: str) -> str:
    """Get directory name from path."""
    return str(Path(path).parent)


def suffix(path: str) -> str:
    """Get lower-cased file extension, including the dot."""
    return Path(path).suffix.lower()


def expand_path(path: str) -> str:
    """Expand ~ in path."""
    return str(Path(path).expanduser())


# File I/O
def read_text(path: str) -> str:
    """Read text file."""
    return Path(path).read_text()


def read_json(path: str) -> dict:
    """Read JSON file."""
    with open(path) as f:
        return json.load(f)


def write_json(path: str, data: Any) -> None:
    """Write JSON file with pretty formatting."""
    with open(path, "w") as f:
        json.dump(data, f, indent=2)


def to_json(data: Any) -> str:
    """Convert data to JSON string."""
    return json.dumps(data, indent=2)


def sha256(obj: Any) -> str:
    """Calculate SHA-256 hash of object."""
    s = obj if isinstance(obj, str) else json.dumps(obj, sort_keys=True)
    return hashlib.sha256(s.encode()).hexdigest()[:16]


def loc(node: Node) -> tuple[int, int]:
    """Get location (line, col) from AST node."""
    if hasattr(node, "loc") and node.loc:
        # GraphQL line numbers are 1-based
        location = node.loc.source.get_location(node.loc.start)
        return (location.line, location.column)
    return (0, 0)
