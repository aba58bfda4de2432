"""Schema file loading."""

from dataclasses import dataclass
from typing import Optional

from . import utils

INTROSPECTION_SUFFIXES = {".json"}


@dataclass
class SchemaSource:
    """A schema read from disk, either SDL text or an introspection result."""

    path: str
    kind: str
    hash: str
    sdl: Optional[str] = None
    introspection: Optional[dict] = None


def load_schema_file(schema_file: str) -> SchemaSource:
    """
    Load a GraphQL schema file.

    ``.json`` files are treated as introspection results; anything else
    (``.graphql``, ``.gql``, ``.graphqls``) as schema definition language.

    Args:
        schema_file: Path to the schema file

    Returns:
        SchemaSource with the raw schema

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if not utils.exists(schema_file):
        raise FileNotFoundError(f"Schema file not found: {schema_file}")

    if utils.suffix(schema_file) in INTROSPECTION_SUFFIXES:
        js = utils.read_json(schema_file)
        return SchemaSource(
            path=schema_file,
            kind="introspection",
            hash=utils.sha256(js),
            introspection=js,
        )

    sdl = utils.read_text(schema_file)
    return SchemaSource(path=schema_file, kind="sdl", hash=utils.sha256(sdl), sdl=sdl)
