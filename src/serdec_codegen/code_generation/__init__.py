"""Code generation exports."""

from .output_formats import (
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
    NamingTemplate,
    OutputFormat,
    UnknownOutputFormatError,
    get_output_format,
)
from .source_writer import (
    DEFAULT_STUB_BODY,
    PROPERTY_VISITORS,
    PropertyVisitor,
    UnknownStubBodyError,
    generate_source,
    get_property_visitor,
    no_body_lines,
    outline_property,
    render_deserializer_stub,
    render_header_block,
    render_preamble,
)

__all__ = [
    "DEFAULT_OUTPUT_FORMAT",
    "DEFAULT_STUB_BODY",
    "OUTPUT_FORMATS",
    "PROPERTY_VISITORS",
    "NamingTemplate",
    "OutputFormat",
    "PropertyVisitor",
    "UnknownOutputFormatError",
    "UnknownStubBodyError",
    "generate_source",
    "get_output_format",
    "get_property_visitor",
    "no_body_lines",
    "outline_property",
    "render_deserializer_stub",
    "render_header_block",
    "render_preamble",
]
