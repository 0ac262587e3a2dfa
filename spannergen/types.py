import dataclasses
import typing

from graphql import TypeKind

from spannergen.annotations import Annotations

BUILTIN_SCALARS = ("ID", "String", "Int", "Float", "Boolean")


@dataclasses.dataclass(frozen=True)
class TypeRef:
    """A type at a usage site, carrying list-ness and nullability.

    A list has an empty ``named_type`` and its element in ``elem``, every
    other reference names a type and has no ``elem``.
    """

    named_type: str = ""
    elem: typing.Optional["TypeRef"] = None
    non_null: bool = False

    @property
    def is_list(self) -> bool:
        return not self.named_type and self.elem is not None

    @property
    def leaf_name(self) -> str:
        """Name of the innermost named type, unwrapping any lists."""
        ref = self
        while ref.elem is not None:
            ref = ref.elem
        return ref.named_type

    @property
    def is_builtin(self) -> bool:
        return self.named_type in BUILTIN_SCALARS

    @classmethod
    def named(cls, name: str, non_null: bool = False) -> "TypeRef":
        return cls(named_type=name, non_null=non_null)

    @classmethod
    def list_of(cls, elem: "TypeRef", non_null: bool = False) -> "TypeRef":
        return cls(elem=elem, non_null=non_null)


@dataclasses.dataclass(frozen=True)
class FieldDef:
    name: str
    type: TypeRef
    description: str = ""
    annotations: Annotations = Annotations()

    @classmethod
    def create(cls, name: str, type: TypeRef, description: typing.Optional[str] = None) -> "FieldDef":
        description = description or ""
        return cls(
            name=name,
            type=type,
            description=description,
            annotations=Annotations.parse(description),
        )


@dataclasses.dataclass(frozen=True)
class TypeDef:
    name: str
    kind: TypeKind
    description: str = ""
    fields: typing.Tuple[FieldDef, ...] = ()
    annotations: Annotations = Annotations()

    @classmethod
    def create(
        cls,
        name: str,
        kind: TypeKind,
        description: typing.Optional[str] = None,
        fields: typing.Iterable[FieldDef] = (),
    ) -> "TypeDef":
        description = description or ""
        return cls(
            name=name,
            kind=kind,
            description=description,
            fields=tuple(fields),
            annotations=Annotations.parse(description),
        )

    @property
    def is_object(self) -> bool:
        return self.kind == TypeKind.OBJECT

    @property
    def is_enum(self) -> bool:
        return self.kind == TypeKind.ENUM

    def get_field(self, name: str) -> typing.Optional[FieldDef]:
        return next((f for f in self.fields if f.name == name), None)


@dataclasses.dataclass(frozen=True)
class Schema:
    types: typing.Mapping[str, TypeDef]

    @classmethod
    def from_types(cls, *type_defs: TypeDef) -> "Schema":
        return cls(types={type_def.name: type_def for type_def in type_defs})

    def get(self, name: str) -> typing.Optional[TypeDef]:
        return self.types.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.types

    @property
    def object_types(self) -> typing.List[TypeDef]:
        return [t for t in self.types.values() if t.is_object]

    @property
    def enum_types(self) -> typing.List[TypeDef]:
        return [t for t in self.types.values() if t.is_enum]
