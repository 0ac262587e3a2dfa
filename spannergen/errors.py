import logging
import os
import typing

from graphql import GraphQLError

DEFAULT_LOGGER = logging.getLogger(__name__)


class SpannerGenError(Exception):
    """Base class for every error that aborts a generation run."""

    pass


class SchemaParseError(SpannerGenError):
    """Raised when the SDL documents cannot be parsed or built into a schema."""

    def __init__(self, errors: typing.Sequence[GraphQLError]) -> None:
        self.errors = list(errors)
        super().__init__(format_errors(self.errors))


class SchemaNotFoundError(SpannerGenError):
    """Raised when the schema path is missing or holds no ``.graphql`` files."""

    def __init__(self, path: typing.Union[str, os.PathLike]) -> None:
        self.path = path
        super().__init__(f"no graphql schema found at {path}")


class UnknownTypeError(SpannerGenError):
    """Raised when a named type is neither a built-in scalar nor in the schema."""

    def __init__(self, type_name: str, field_name: typing.Optional[str] = None) -> None:
        self.type_name = type_name
        self.field_name = field_name
        message = f"not found type {type_name}"
        if field_name is not None:
            message = f"{message} (referenced by field '{field_name}')"
        super().__init__(message)


class CyclicReferenceError(SpannerGenError):
    """Raised when primary key resolution loops back to a type already visited."""

    def __init__(self, path: typing.Sequence[str]) -> None:
        self.path = tuple(path)
        super().__init__(f"cyclic primary key reference: {' -> '.join(self.path)}")


class TemplateRenderError(SpannerGenError):
    """Raised when the template fails to compile or execute."""

    pass


def format_errors(
    errors: typing.Optional[typing.Sequence[GraphQLError]] = None,
    logger: typing.Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
) -> str:
    """Return a single message for a list of GraphQL errors.

    Each error is placed on its own line prefixed with the location in the
    source document when graphql-core reports one.
    """
    if not errors:
        return ""

    logger = logger or DEFAULT_LOGGER

    lines: typing.List[str] = []
    for err in errors:
        logger.log(level, f"{err!r}")
        if err.locations:
            location = err.locations[0]
            lines.append(f"{location.line}:{location.column}: {err.message}")
        else:
            lines.append(err.message)
    return "\n".join(lines)
