import argparse
import logging
import pathlib
import sys

import tomli

from spannergen.errors import SpannerGenError
from spannergen.templating import render_file

LOG = logging.getLogger(__name__)

# create the top-level parser for global options
parser = argparse.ArgumentParser(
    prog="spannergen",
    description="Render templates from a GraphQL schema with Go and Cloud Spanner type helpers.",
)
parser.add_argument(
    "--config",
    help="Specify a different location or name of the configuration file. This should be a well formatted TOML file.",
    default="pyproject.toml",
)


# Sub Commands parser
subparsers = parser.add_subparsers(dest="command")  # type: ignore

# create the parser for the "render" command
render_parser = subparsers.add_parser(
    "render",
    help="Render a template file for a GraphQL schema.",
)
render_parser.add_argument(
    "--debug",
    "-d",
    action="store_true",
    help="Display debug information while parsing and rendering.",
)
render_parser.add_argument(
    "--schema",
    "-s",
    help="Path to a graphql sdl file or a directory of .graphql files.",
    default=None,
)
render_parser.add_argument(
    "--template",
    "-t",
    help="Path to the jinja2 template file.",
    default=None,
)
render_parser.add_argument(
    "--output",
    "-o",
    help="Write the rendered output to this file instead of stdout.",
    default=None,
)


def load_config(config) -> dict:
    source = pathlib.Path(config)
    if not source.is_file():
        return {}

    with open(source, "rb") as conf_file:
        options = tomli.load(conf_file)
        return options.get("tool", {}).get("spannergen", {})


def run_render(schema: str, template: str, output: str | None) -> None:
    rendered = render_file(
        schema_path=pathlib.Path(schema),
        template_path=pathlib.Path(template),
        output=pathlib.Path(output) if output else None,
    )
    if not output:
        sys.stdout.write(rendered)


def main():
    argv = sys.argv[1:] or ["--help"]
    options = parser.parse_args(argv)
    if not options.command:
        parser.print_help()
        return

    level = logging.DEBUG if options.debug else logging.INFO
    sys.tracebacklimit = 99 if options.debug else -1
    logging.basicConfig(level=level)
    configuration = load_config(options.config)

    if options.command == "render":
        render_config = configuration.get("render", {})
        schema = options.schema or render_config.get("schema")
        template = options.template or render_config.get("template")
        output = options.output or render_config.get("output")
        if not schema or not template:
            render_parser.error("both --schema and --template are required")

        try:
            run_render(schema=schema, template=template, output=output)
        except SpannerGenError as exc:
            LOG.error(f"{exc}")
            raise SystemExit(1) from exc
