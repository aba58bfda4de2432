"""Translate GraphQL queries into OpenAPI documents."""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from graphql import (
    BREAK,
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    GraphQLError,
    GraphQLNonNull,
    GraphQLSchema,
    GraphQLUnionType,
    InlineFragmentNode,
    OperationDefinitionNode,
    Source,
    TypeInfo,
    TypeInfoVisitor,
    VariableDefinitionNode,
    Visitor,
    visit,
)

from . import parser, utils
from .context import TraversalState
from .document import add_operation, add_parameter, new_document, response_schema
from .errors import MissingSchemaError, NoOperationNameError
from .nodes import is_container, new_object, new_union, properties_target, variants_target
from .scalars import ScalarFallback, ScalarResolver
from .type_mapper import map_field_type, map_input_type

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of one translation; exactly one field is set."""

    schema_error: Optional[Exception] = None
    query_errors: Optional[list[GraphQLError]] = None
    error: Optional[NoOperationNameError] = None
    openapi_schema: Optional[dict] = None

    @property
    def ok(self) -> bool:
        return self.openapi_schema is not None


class _SpreadCollector(Visitor):
    def __init__(self):
        super().__init__()
        self.names: list[str] = []

    def enter_fragment_spread(self, node: FragmentSpreadNode, *_args):
        self.names.append(node.name.value)


def fragment_dependencies(node: FragmentDefinitionNode) -> list[str]:
    """Names of the fragments spread anywhere inside ``node``."""
    collector = _SpreadCollector()
    visit(node, collector)
    return collector.names


def order_definitions(doc: DocumentNode) -> DocumentNode:
    """
    Move fragment definitions ahead of operations, dependencies first.

    Validation has already rejected fragment cycles and unknown fragments, so
    every spread finds its fragment finished by the time it is visited.
    """
    fragments = {
        d.name.value: d for d in doc.definitions if isinstance(d, FragmentDefinitionNode)
    }
    ordered = []
    seen = set()

    def add(name: str) -> None:
        if name in seen or name not in fragments:
            return
        seen.add(name)
        for dependency in fragment_dependencies(fragments[name]):
            add(dependency)
        ordered.append(fragments[name])

    for name in fragments:
        add(name)

    others = [d for d in doc.definitions if not isinstance(d, FragmentDefinitionNode)]
    return DocumentNode(definitions=tuple(ordered + others), loc=doc.loc)


def merge_fragment(site: dict, fragment: dict) -> None:
    """
    Inline a finished fragment node at a spread site.

    Properties are merged key by key in selection order. A key already
    holding a container is merged into recursively; any other key is replaced
    by the later selection. Union sites collect variants.
    """
    union = variants_target(site)
    if union is not None:
        if "anyOf" in fragment:
            union["anyOf"].extend(fragment["anyOf"])
        else:
            union["anyOf"].append({"type": "object", "properties": fragment["properties"]})
        return

    target = properties_target(site)
    if "anyOf" in fragment:
        for variant in fragment["anyOf"]:
            merge_properties(target["properties"], variant.get("properties", {}))
    else:
        merge_properties(target["properties"], fragment["properties"])


def merge_properties(properties: dict, incoming: dict) -> None:
    """Merge ``incoming`` into ``properties``, descending into shared containers."""
    for name, node in incoming.items():
        existing = properties.get(name)
        if existing is None or not (is_container(existing) and is_container(node)):
            properties[name] = node
            continue
        existing_union = variants_target(existing)
        incoming_union = variants_target(node)
        if existing_union is not None and incoming_union is not None:
            existing_union["anyOf"].extend(incoming_union["anyOf"])
            continue
        existing_object = properties_target(existing)
        incoming_object = properties_target(node)
        if existing_object is not None and incoming_object is not None:
            merge_properties(existing_object["properties"], incoming_object["properties"])
        else:
            properties[name] = node


class OpenAPIVisitor(Visitor):
    """Build response schemas and parameters while the query is walked."""

    def __init__(self, state: TraversalState, type_info: TypeInfo, resolver: ScalarResolver):
        super().__init__()
        self.state = state
        self.type_info = type_info
        self.resolver = resolver

    def enter_operation_definition(self, node: OperationDefinitionNode, *_args):
        if not node.name:
            line = utils.loc(node)[0]
            self.state.error = NoOperationNameError(
                f"GraphQLToOpenAPIConverter requires a named operation on line {line} of input query",
                line=line,
            )
            return BREAK

        operation = add_operation(self.state.document, node.name.value)
        self.state.operation = operation
        self.state.stack.push(node, response_schema(operation))

    def leave_operation_definition(self, node: OperationDefinitionNode, *_args):
        if self.state.stack.is_top(node):
            self.state.stack.pop()
        logger.info(
            "Built GET /%s with %d parameter(s)",
            node.name.value,
            len(self.state.operation["parameters"]),
        )

    def enter_variable_definition(self, node: VariableDefinitionNode, *_args):
        schema = map_input_type(self.type_info.get_input_type(), self.resolver)
        add_parameter(self.state.operation, node.variable.name.value, schema)

    def enter_fragment_definition(self, node: FragmentDefinitionNode, *_args):
        fragment_type = self.type_info.get_type()
        if isinstance(fragment_type, GraphQLUnionType):
            schema = new_union()
        else:
            schema = new_object(nullable=not isinstance(fragment_type, GraphQLNonNull))
        self.state.stack.push(node, schema)

    def leave_fragment_definition(self, node: FragmentDefinitionNode, *_args):
        self.state.fragments.add(node.name.value, self.state.stack.pop())

    def enter_field(self, node: FieldNode, *_args):
        name = node.alias.value if node.alias else node.name.value
        schema = map_field_type(self.type_info.get_field_def(), self.resolver)

        target = properties_target(self.state.current_schema())
        if target is None:
            # only __typename can be selected directly on a union
            logger.debug("Not recording %s selected on a union", name)
        else:
            existing = target["properties"].get(name)
            if existing is not None and is_container(existing) and is_container(schema):
                schema = existing
            target["properties"][name] = schema

        if node.selection_set and is_container(schema):
            self.state.stack.push(node, schema)

    def leave_field(self, node: FieldNode, *_args):
        if self.state.stack.is_top(node):
            self.state.stack.pop()

    def enter_fragment_spread(self, node: FragmentSpreadNode, *_args):
        merge_fragment(self.state.current_schema(), self.state.fragments.get(node.name.value))

    def enter_inline_fragment(self, node: InlineFragmentNode, *_args):
        site = self.state.current_schema()
        union = variants_target(site)
        if union is None:
            # type-narrowing on an object or interface: fields land in the site itself
            self.state.stack.push(node, site)
            return
        variant = new_object()
        union["anyOf"].append(variant)
        self.state.stack.push(node, variant)

    def leave_inline_fragment(self, node: InlineFragmentNode, *_args):
        self.state.stack.pop()


class GraphQLToOpenAPIConverter:
    """
    Translate queries against one GraphQL schema into OpenAPI documents.

    Exactly one of ``schema`` (SDL) or ``introspection_schema`` is required.
    A schema that fails to build does not raise here; every later call to
    ``to_openapi`` reports it as ``schema_error``.

    Args:
        schema: Schema definition language text
        introspection_schema: Introspection result
        on_unknown_scalar: Called with a custom scalar's name, returns its node or None
        scalar_config: Scalar cache, shared by every call on this converter
        info: Overrides for the document's ``info`` block
        servers: Server URLs for the document

    Raises:
        MissingSchemaError: If neither schema form is supplied
    """

    def __init__(
        self,
        schema: Union[str, Source, None] = None,
        introspection_schema: Optional[dict] = None,
        on_unknown_scalar: Optional[ScalarFallback] = None,
        scalar_config: Optional[dict] = None,
        info: Optional[dict] = None,
        servers: Optional[list[str]] = None,
    ):
        self.scalar_config = scalar_config if scalar_config is not None else {}
        self.resolver = ScalarResolver(self.scalar_config, on_unknown_scalar)
        self.info = info
        self.servers = servers
        self.graphql_schema: Optional[GraphQLSchema] = None
        self.schema_error: Optional[Exception] = None

        if schema:
            build, source = parser.build_schema_from_sdl, schema
        elif introspection_schema:
            build, source = parser.build_schema_from_introspection, introspection_schema
        else:
            raise MissingSchemaError("neither schema nor introspection schema supplied")

        try:
            self.graphql_schema = build(source)
        except (GraphQLError, TypeError, KeyError, ValueError) as err:
            logger.warning("Failed to build GraphQL schema: %s", err)
            self.schema_error = err

    def to_openapi(self, query: Union[str, Source]) -> ConversionResult:
        """
        Translate a query document.

        Args:
            query: GraphQL query text or Source

        Returns:
            ConversionResult holding the document or the reason there is none

        Raises:
            UnknownScalarError: If a custom scalar cannot be resolved
            DepthLimitExceededError: If a variable's input type nests too deeply
        """
        if self.schema_error is not None:
            return ConversionResult(schema_error=self.schema_error)

        try:
            doc = parser.parse_query(query)
        except GraphQLError as err:
            return ConversionResult(query_errors=[err])

        query_errors = parser.validate_query(doc, self.graphql_schema)
        if query_errors:
            return ConversionResult(query_errors=list(query_errors))

        state = TraversalState(new_document(self.info, self.servers))
        type_info = TypeInfo(self.graphql_schema)
        visit(
            order_definitions(doc),
            TypeInfoVisitor(type_info, OpenAPIVisitor(state, type_info, self.resolver)),
        )

        if state.error is not None:
            return ConversionResult(error=state.error)
        return ConversionResult(openapi_schema=state.document)
