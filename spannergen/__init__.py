from .annotations import Annotations
from .errors import (
    CyclicReferenceError,
    SchemaNotFoundError,
    SchemaParseError,
    SpannerGenError,
    TemplateRenderError,
    UnknownTypeError,
)
from .helpers import TemplateHelpers
from .templating import render, render_file
from .resolver import TypeResolver, find_primary_key
from .schema import build_schema, concat_documents, load_schema
from .types import FieldDef, Schema, TypeDef, TypeRef

__all__ = [
    "Annotations",
    "CyclicReferenceError",
    "FieldDef",
    "Schema",
    "SchemaNotFoundError",
    "SchemaParseError",
    "SpannerGenError",
    "TemplateHelpers",
    "TemplateRenderError",
    "TypeDef",
    "TypeRef",
    "TypeResolver",
    "UnknownTypeError",
    "build_schema",
    "concat_documents",
    "find_primary_key",
    "load_schema",
    "render",
    "render_file",
]

__VERSION__ = "0.1.0"
