"""
Template Rendering
------------------

Renders a jinja2 template with the schema and the helper functions. The
whole output is rendered in memory first so a failing template or an
unresolvable type never leaves a partially written file behind.
"""

from __future__ import annotations

import logging
import pathlib
from typing import Any, Dict, Optional, Union

from jinja2 import (
    BaseLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
)

from spannergen.errors import TemplateRenderError
from spannergen.helpers import TemplateHelpers
from spannergen.resolver import TypeResolver
from spannergen.schema import build_schema, load_schema
from spannergen.types import Schema

LOG = logging.getLogger(__name__)


def create_environment(
    helpers: TemplateHelpers,
    loader: Optional[BaseLoader] = None,
) -> Environment:
    jinja_env = Environment(
        loader=loader,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    jinja_env.globals.update(helpers.as_globals())
    jinja_env.filters.update(helpers.as_filters())
    return jinja_env


def get_context(schema: Schema) -> Dict[str, Any]:
    return {"schema": schema, "types": schema.types}


def _render(template: Template, schema: Schema) -> str:
    try:
        return template.render(**get_context(schema))
    except TemplateError as exc:
        raise TemplateRenderError(f"failed to render template: {exc}") from exc
    except (TypeError, AttributeError) as exc:
        # A helper called with the wrong arguments, e.g. GoType(field).
        raise TemplateRenderError(f"failed to render template: {exc!r}") from exc


def render(
    schema: Schema,
    template_source: str,
    helpers: Optional[TemplateHelpers] = None,
) -> str:
    """Render a template string against the schema."""
    helpers = helpers or TemplateHelpers(TypeResolver(schema))
    jinja_env = create_environment(helpers)
    try:
        template = jinja_env.from_string(template_source)
    except TemplateError as exc:
        raise TemplateRenderError(f"failed to compile template: {exc}") from exc

    return _render(template, schema)


def render_file(
    schema_path: Union[str, pathlib.Path],
    template_path: Union[str, pathlib.Path],
    output: Optional[Union[str, pathlib.Path]] = None,
) -> str:
    """Render the template file for the schema file or directory.

    Templates are loaded from the directory of ``template_path`` so they
    may ``include`` or ``extends`` their siblings. The rendered text is
    written to ``output`` when given and always returned.
    """
    schema = build_schema(load_schema(schema_path))
    template_path = pathlib.Path(template_path)

    helpers = TemplateHelpers(TypeResolver(schema))
    jinja_env = create_environment(
        helpers,
        loader=FileSystemLoader(str(template_path.parent)),
    )
    try:
        template = jinja_env.get_template(template_path.name)
    except TemplateError as exc:
        raise TemplateRenderError(f"failed to load template {template_path}: {exc}") from exc

    LOG.debug(f"Rendering {template_path} with {len(schema.types)} types")
    rendered = _render(template, schema)

    if output is not None:
        output = pathlib.Path(output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered, encoding="utf-8")
        LOG.info(f"Wrote {output}")

    return rendered
