"""C source skeleton generation service."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType
from typing import TextIO

from serdec_codegen.licensing.license_notices import LicenseNotice, get_license_notice
from serdec_codegen.naming.identifier_naming import DataDefinition
from serdec_codegen.schema_management.schema_models import SchemaProperty

from .constants import (
    BANNER_LINE,
    BODY_INDENT,
    COMMENT_MARKER,
    DEFAULT_COPYRIGHT_LINE,
    HEADER_LABEL_WIDTH,
    HEADER_TERMINATOR,
)
from .output_formats import OutputFormat, get_output_format

PropertyVisitor = Callable[[str, SchemaProperty], Sequence[str]]

DEFAULT_STUB_BODY = "empty"


class UnknownStubBodyError(Exception):
    """Raised when a stub body name has no registered property visitor."""


def no_body_lines(name: str, prop: SchemaProperty) -> Sequence[str]:
    """Default property visitor: contributes nothing, leaving the stub body empty."""
    return ()


def outline_property(name: str, prop: SchemaProperty) -> Sequence[str]:
    """Property visitor emitting one comment line per property."""
    kind = prop.property_type or (f"$ref {prop.schema_ref}" if prop.schema_ref else "untyped")
    line = f"{COMMENT_MARKER} {name}: {kind}"
    if prop.default is not None:
        line += f" (default {prop.default})"
    return (line,)


PROPERTY_VISITORS: Mapping[str, PropertyVisitor] = MappingProxyType(
    {"empty": no_body_lines, "outline": outline_property}
)


def get_property_visitor(name: str = DEFAULT_STUB_BODY) -> PropertyVisitor:
    """Return the property visitor registered for stub body style `name`."""
    try:
        return PROPERTY_VISITORS[name]
    except KeyError as exc:
        known = ", ".join(sorted(PROPERTY_VISITORS))
        raise UnknownStubBodyError(f"Unknown stub body '{name}'. Known bodies: {known}") from exc


def generate_source(
    definition: DataDefinition,
    output_name: str,
    sink: TextIO,
    *,
    output_format: OutputFormat | None = None,
    license_notice: LicenseNotice | None = None,
    copyright_line: str = DEFAULT_COPYRIGHT_LINE,
    visitor: PropertyVisitor = no_body_lines,
) -> None:
    """Write the header, preamble, and deserializer stub for `definition` to `sink`.

    Sections are written as soon as they are rendered, so a failing sink leaves
    whatever was written before the failure in place.

    Raises:
      OSError: If writing to `sink` fails.
    """
    resolved_format = output_format or get_output_format()
    resolved_notice = license_notice or get_license_notice()

    sink.write(render_header_block(output_name, resolved_notice, copyright_line))
    sink.write("\n")
    sink.write(render_preamble(resolved_format))
    sink.write("\n")
    sink.write(render_deserializer_stub(definition, resolved_format, visitor))


def render_header_block(output_name: str, notice: LicenseNotice, copyright_line: str) -> str:
    lines = [
        BANNER_LINE,
        f"{COMMENT_MARKER} {'NAME:':<{HEADER_LABEL_WIDTH}}{output_name}",
        COMMENT_MARKER,
        f"{COMMENT_MARKER} {copyright_line}",
        COMMENT_MARKER,
    ]
    lines.extend(_comment_line(line) for line in notice.lines())
    lines.append(HEADER_TERMINATOR)
    return "\n".join(lines) + "\n"


def render_preamble(output_format: OutputFormat) -> str:
    return f"{output_format.include_directive}\n"


def render_deserializer_stub(
    definition: DataDefinition,
    output_format: OutputFormat,
    visitor: PropertyVisitor = no_body_lines,
) -> str:
    function_name = output_format.deserializer_name.render(definition.prefix)
    signature = (
        f"{output_format.return_type} {function_name}"
        f"({output_format.input_parameter}, {definition.identifier}* data)"
    )

    body: list[str] = []
    for name in sorted(definition.schema.properties):
        body.extend(visitor(name, definition.schema.properties[name]))

    if not body:
        return f"{signature} {{ }}\n"
    indented = "".join(f"{BODY_INDENT}{line}\n" for line in body)
    return f"{signature} {{\n{indented}}}\n"


def _comment_line(text: str) -> str:
    return f"{COMMENT_MARKER} {text}" if text else COMMENT_MARKER
