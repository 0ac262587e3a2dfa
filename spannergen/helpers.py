import typing

from spannergen import utils
from spannergen.resolver import TypeResolver
from spannergen.types import FieldDef, TypeDef


class TemplateHelpers:
    """
    Resolver operations exposed to templates.

    Every method forwards to :class:`TypeResolver` or :mod:`spannergen.utils`
    without adding any behavior of its own. Templates see them under the
    names returned by :meth:`as_globals`::

        {% for field in types.Order.fields %}
        {{ snakeToUpperCamel(field.name) }} {{ SpannerGoType(field, true) }}
        {% endfor %}
    """

    def __init__(self, resolver: TypeResolver) -> None:
        self.resolver = resolver

    def go_type(self, field: FieldDef, replace_object_refs: bool) -> str:
        return self.resolver.resolve_field_type(field, replace_object_refs)

    def spanner_go_type(self, field: FieldDef, replace_object_refs: bool) -> str:
        return self.resolver.resolve_persisted_type(field, replace_object_refs)

    def exists(self, type_def: TypeDef, camel_name: str) -> bool:
        return self.resolver.field_exists(type_def, camel_name)

    def found_pk(
        self, object_name: str, fields: typing.Iterable[FieldDef]
    ) -> typing.Optional[FieldDef]:
        return self.resolver.find_primary_key(object_name, fields)

    def is_object(self, field: FieldDef) -> bool:
        return self.resolver.is_object_field(field)

    def convert_name(self, field: FieldDef) -> str:
        return self.resolver.column_name(field)

    def convert_object_field_name(self, field: FieldDef) -> str:
        return self.resolver.resolve_column_name(field)

    snake_to_upper_camel = staticmethod(utils.snake_to_upper_camel)
    upper_camel = staticmethod(utils.upper_camel)
    lower_camel = staticmethod(utils.lower_camel)
    joinstr = staticmethod(utils.joinstr)

    def as_globals(self) -> typing.Dict[str, typing.Callable]:
        """Template function names mapped to the bound helper methods."""
        return {
            "GoType": self.go_type,
            "SpannerGoType": self.spanner_go_type,
            "exists": self.exists,
            "foundPK": self.found_pk,
            "isObject": self.is_object,
            "convertName": self.convert_name,
            "ConvertObjectFieldName": self.convert_object_field_name,
            "snakeToUpperCamel": self.snake_to_upper_camel,
            "lowerCamel": self.lower_camel,
            "joinstr": self.joinstr,
        }

    def as_filters(self) -> typing.Dict[str, typing.Callable]:
        return {
            "upper_camel": self.upper_camel,
            "lower_camel": self.lower_camel,
            "snake_to_upper_camel": self.snake_to_upper_camel,
            "pluralize": utils.pluralize,
            "singularize": utils.singularize,
        }
