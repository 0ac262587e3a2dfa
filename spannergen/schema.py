"""
Schema Utilities
----------------

Load SDL documents with graphql-core and convert the resulting
:class:`graphql.GraphQLSchema` into the read only :class:`spannergen.types.Schema`
view that the resolver and the templates work with.
"""

import logging
import pathlib
import typing

from graphql import (
    DocumentNode,
    GraphQLError,
    GraphQLNamedType,
    GraphQLSchema,
    GraphQLType,
    TypeKind,
    build_ast_schema,
    concat_ast,
    get_nullable_type,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
    parse,
)

from spannergen.errors import SchemaNotFoundError, SchemaParseError
from spannergen.types import FieldDef, Schema, TypeDef, TypeRef

LOG = logging.getLogger(__name__)


def maybe_parse(type_def: typing.Union[str, DocumentNode]) -> DocumentNode:
    if isinstance(type_def, str):
        return parse(type_def)
    return type_def


def concat_documents(
    type_defs: typing.Iterable[typing.Union[str, DocumentNode]],
) -> DocumentNode:
    try:
        document_list = [maybe_parse(type_def) for type_def in type_defs]
    except GraphQLError as exc:
        raise SchemaParseError([exc]) from exc

    return concat_ast(document_list)


def convert_type(type_obj: GraphQLType) -> TypeRef:
    """Convert a graphql-core type (with its wrappers) into a TypeRef."""
    non_null = is_non_null_type(type_obj)
    if non_null:
        type_obj = get_nullable_type(type_obj)  # type: ignore

    if is_list_type(type_obj):
        elem = convert_type(type_obj.of_type)  # type: ignore
        return TypeRef.list_of(elem, non_null=non_null)

    named = typing.cast(GraphQLNamedType, type_obj)
    return TypeRef.named(named.name, non_null=non_null)


def get_kind(definition: GraphQLNamedType) -> TypeKind:
    if is_object_type(definition):
        return TypeKind.OBJECT
    if is_interface_type(definition):
        return TypeKind.INTERFACE
    if is_union_type(definition):
        return TypeKind.UNION
    if is_enum_type(definition):
        return TypeKind.ENUM
    if is_input_object_type(definition):
        return TypeKind.INPUT_OBJECT
    if is_scalar_type(definition):
        return TypeKind.SCALAR
    raise TypeError(f"Unexpected type definition: {definition!r}")


def convert_definition(definition: GraphQLNamedType) -> TypeDef:
    fields: typing.List[FieldDef] = []
    # Input objects, interfaces and objects all expose an ordered `fields` map.
    for field_name, field in getattr(definition, "fields", {}).items():
        fields.append(
            FieldDef.create(
                name=field_name,
                type=convert_type(field.type),
                description=field.description,
            )
        )

    return TypeDef.create(
        name=definition.name,
        kind=get_kind(definition),
        description=definition.description,
        fields=fields,
    )


def convert_schema(graphql_schema: GraphQLSchema) -> Schema:
    types: typing.Dict[str, TypeDef] = {}
    for name, definition in graphql_schema.type_map.items():
        if name.startswith("__"):
            continue
        types[name] = convert_definition(definition)

    LOG.debug(f"Converted schema with {len(types)} types")
    return Schema(types=types)


def build_schema(
    type_defs: typing.Iterable[typing.Union[str, DocumentNode]],
) -> Schema:
    """
    Build Schema

    Parse and merge the SDL documents, then build the read only view. Types
    may be split over several documents and extended with ``extend type``::

        type Book {
            name: String
        }

        extend type Book {
            "SpannerPK"
            isbn: ID!
        }

    :param type_defs: list of schema strings or document nodes
    :raises SchemaParseError: when graphql-core rejects the documents
    """
    ast_document = concat_documents(type_defs)

    try:
        graphql_schema = build_ast_schema(ast_document)
    except GraphQLError as exc:
        raise SchemaParseError([exc]) from exc
    except TypeError as exc:
        # graphql-core reports SDL validation failures as a TypeError
        # listing every GraphQLError message.
        raise SchemaParseError([GraphQLError(str(exc))]) from exc

    return convert_schema(graphql_schema)


def load_schema(
    directory: typing.Union[str, pathlib.Path],
) -> typing.List[DocumentNode]:
    """
    Load Schema

    This utility will load schema from a directory or a single pathlib.Path

    :param directory: Directory to load schema files from
    :raises SchemaNotFoundError: when the path does not exist or the
        directory holds no ``.graphql`` files
    """
    if isinstance(directory, str):
        LOG.debug(f"Converting str {directory} to path object")
        directory = pathlib.Path(directory)

    if directory.is_file():
        LOG.debug(f"loading schema from file: {directory}")
        return [parse_source(directory.read_text(encoding="utf-8"), directory)]

    if not directory.is_dir():
        raise SchemaNotFoundError(directory)

    def find_graphql_files():
        LOG.debug(f"Checking for graphql files to load in: '{directory}'")
        for graph in sorted(directory.glob("**/*.graphql")):
            LOG.debug(f"loading discovered file: {graph}")
            yield graph

    documents = [
        parse_source(graph.read_text(encoding="utf-8"), graph)
        for graph in find_graphql_files()
    ]
    if not documents:
        raise SchemaNotFoundError(directory)

    return documents


def parse_source(source: str, path: pathlib.Path) -> DocumentNode:
    try:
        return parse(source)
    except GraphQLError as exc:
        LOG.debug(f"failed to parse {path}")
        raise SchemaParseError([exc]) from exc
