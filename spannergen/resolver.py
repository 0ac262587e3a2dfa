"""
Type Resolution
---------------

Maps GraphQL field types onto Go types for generated models and Cloud
Spanner columns.

Object references can be rendered as the nested object itself or, when
``replace_object_refs`` is set, collapsed into the type of the referenced
object's primary key, which is how a foreign key column is stored.
"""

import logging
import typing

from spannergen.errors import CyclicReferenceError, UnknownTypeError
from spannergen.types import FieldDef, Schema, TypeDef, TypeRef
from spannergen.utils import pluralize, singularize, upper_camel

LOG = logging.getLogger(__name__)

GO_TYPES = {
    "ID": "string",
    "String": "string",
    "Int": "int64",
    "Float": "float64",
    "Boolean": "bool",
}

SPANNER_NULL_TYPES = {
    "ID": "spanner.NullString",
    "String": "spanner.NullString",
    "Int": "spanner.NullInt64",
    "Float": "spanner.NullFloat64",
    "Boolean": "spanner.NullBool",
}

NULL_STRING = SPANNER_NULL_TYPES["String"]
FALLBACK_TYPE = GO_TYPES["String"]
POINTER = "*"
SLICE = "[]"


def find_primary_key(
    object_name: str, fields: typing.Iterable[FieldDef]
) -> typing.Optional[FieldDef]:
    """Return the primary key field of an object type.

    The first field in declaration order wins when it is annotated with
    ``SpannerPK``, is named ``id`` or is named after the object plus ``Id``
    (``orderId`` or ``order_id`` for ``Order``).
    """
    object_id = upper_camel(f"{object_name}Id")
    for field in fields:
        camel_name = upper_camel(field.name)
        if field.annotations.primary_key or camel_name == "Id" or camel_name == object_id:
            return field
    return None


def null_prefix(type_ref: TypeRef) -> str:
    return "" if type_ref.non_null else POINTER


class TypeResolver:
    """Answers type mapping questions about a single immutable schema."""

    def __init__(self, schema: Schema) -> None:
        self.schema = schema

    def get_type(self, type_name: str, field_name: typing.Optional[str] = None) -> TypeDef:
        type_def = self.schema.get(type_name)
        if type_def is None:
            raise UnknownTypeError(type_name, field_name=field_name)
        return type_def

    def find_primary_key(
        self, object_name: str, fields: typing.Iterable[FieldDef]
    ) -> typing.Optional[FieldDef]:
        return find_primary_key(object_name, fields)

    def primary_key_of(self, type_def: TypeDef) -> typing.Optional[FieldDef]:
        primary_key = find_primary_key(type_def.name, type_def.fields)
        if primary_key is None:
            LOG.debug(f"No primary key found for {type_def.name}")
        return primary_key

    def null_prefix(self, type_ref: TypeRef) -> str:
        return null_prefix(type_ref)

    def resolve_base_type(
        self,
        type_ref: TypeRef,
        replace_object_refs: bool,
        field_name: typing.Optional[str] = None,
    ) -> str:
        return self._base_type(type_ref, replace_object_refs, field_name, ())

    def _base_type(
        self,
        type_ref: TypeRef,
        replace: bool,
        field_name: typing.Optional[str],
        visited: typing.Tuple[str, ...],
    ) -> str:
        if type_ref.is_list:
            elem = typing.cast(TypeRef, type_ref.elem)
            return SLICE + null_prefix(elem) + self._base_type(elem, replace, field_name, visited)

        if type_ref.is_builtin:
            return GO_TYPES[type_ref.named_type]

        type_def = self.get_type(type_ref.named_type, field_name)
        if type_def.annotations.go_type is not None:
            return type_def.annotations.go_type

        if not replace:
            return type_def.name

        visited = self._visit(type_def.name, visited)
        primary_key = self.primary_key_of(type_def)
        if primary_key is None:
            return FALLBACK_TYPE

        return self._base_type(primary_key.type, replace, primary_key.name, visited)

    def resolve_field_type(self, field: FieldDef, replace_object_refs: bool) -> str:
        """Go type of a field, ``*`` marks a nullable value and ``[]`` a slice."""
        type_ref = field.type
        if type_ref.is_list:
            elem = typing.cast(TypeRef, type_ref.elem)
            return SLICE + null_prefix(elem) + self.resolve_base_type(
                elem, replace_object_refs, field.name
            )

        return null_prefix(type_ref) + self.resolve_base_type(
            type_ref, replace_object_refs, field.name
        )

    def resolve_persisted_type(self, field: FieldDef, replace_object_refs: bool) -> str:
        """Go type of a field stored in a Cloud Spanner column.

        Nullable scalars and enums use the ``spanner.Null*`` wrappers instead
        of pointers. A nullable object reference becomes the column type of
        the referenced primary key when ``replace_object_refs`` is set.
        """
        return self._persisted_type(field, replace_object_refs, ())

    def _persisted_type(
        self,
        field: FieldDef,
        replace: bool,
        visited: typing.Tuple[str, ...],
    ) -> str:
        type_ref = field.type

        if type_ref.is_list:
            return self.resolve_field_type(field, replace)

        if type_ref.is_builtin:
            if type_ref.non_null:
                return self.resolve_field_type(field, replace)
            return SPANNER_NULL_TYPES[type_ref.named_type]

        type_def = self.get_type(type_ref.named_type, field.name)

        if type_def.is_enum:
            if type_ref.non_null:
                return self.resolve_field_type(field, replace)
            return NULL_STRING

        if type_def.is_object:
            if type_ref.non_null or not replace:
                return self.resolve_field_type(field, replace)

            visited = self._visit(type_def.name, visited)
            primary_key = self.primary_key_of(type_def)
            if primary_key is None:
                return NULL_STRING
            return self._persisted_type(primary_key, replace, visited)

        return self.resolve_field_type(field, replace)

    def is_object_field(self, field: FieldDef) -> bool:
        type_def = self.schema.get(field.type.leaf_name)
        return type_def is not None and type_def.is_object

    def column_name(self, field: FieldDef) -> str:
        """The ``SpannerColumn:`` override or the field name."""
        if field.annotations.column is not None:
            return field.annotations.column
        return field.name

    def resolve_column_name(self, field: FieldDef) -> str:
        """Column name of a field, object references use their key column.

        ``customer: Customer`` is stored as ``customerId`` and
        ``items: [Item]`` as ``itemIds``.
        """
        name = self.column_name(field)
        if not self.is_object_field(field):
            return name

        if field.type.is_list:
            return pluralize(singularize(name) + "Id")
        return name + "Id"

    def field_exists(self, type_def: TypeDef, camel_name: str) -> bool:
        return any(upper_camel(f.name) == camel_name for f in type_def.fields)

    def _visit(self, type_name: str, visited: typing.Tuple[str, ...]) -> typing.Tuple[str, ...]:
        if type_name in visited:
            raise CyclicReferenceError(visited + (type_name,))
        return visited + (type_name,)
