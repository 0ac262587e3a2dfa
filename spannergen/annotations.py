"""
Description Annotations
-----------------------

Generation is configured with plain text directives placed in the
description of a type or field::

    "GoType: time.Time"
    scalar Time

    type Order {
        "SpannerPK"
        ref: ID!
        "SpannerColumn: CustomerID"
        customer: Customer
    }

``GoType`` and ``SpannerColumn`` must start a line of the description, only
the first matching line is used. ``SpannerPK`` may appear anywhere.
"""

import dataclasses
import re
import typing

GO_TYPE_RE = re.compile(r"^GoType: ?(.*)$", re.MULTILINE)
SPANNER_COLUMN_RE = re.compile(r"^SpannerColumn: ?(.*)$", re.MULTILINE)
PRIMARY_KEY_MARKER = "SpannerPK"


def _first_match(pattern: re.Pattern, description: typing.Optional[str]) -> typing.Optional[str]:
    if not description:
        return None
    match = pattern.search(description)
    if match is None:
        return None
    return match.group(1)


def extract_go_type(description: typing.Optional[str]) -> typing.Optional[str]:
    """Return the ``GoType:`` override of a description, if any."""
    return _first_match(GO_TYPE_RE, description)


def extract_column_name(description: typing.Optional[str]) -> typing.Optional[str]:
    """Return the ``SpannerColumn:`` override of a description, if any."""
    return _first_match(SPANNER_COLUMN_RE, description)


def has_primary_key_marker(description: typing.Optional[str]) -> bool:
    return PRIMARY_KEY_MARKER in (description or "")


@dataclasses.dataclass(frozen=True)
class Annotations:
    go_type: typing.Optional[str] = None
    column: typing.Optional[str] = None
    primary_key: bool = False

    @classmethod
    def parse(cls, description: typing.Optional[str]) -> "Annotations":
        return cls(
            go_type=extract_go_type(description),
            column=extract_column_name(description),
            primary_key=has_primary_key_marker(description),
        )
