"""Serialization format profiles and deserializer naming templates."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

DEFAULT_OUTPUT_FORMAT = "yaml"


class UnknownOutputFormatError(Exception):
    """Raised when an output format name has no registered profile."""


@dataclass(frozen=True)
class NamingTemplate:
    """Format string assembling a function name from named slots.

    Recognised slots are `prefix`, `format_kind` and `suffix`.
    """

    pattern: str
    format_kind: str
    suffix: str

    def render(self, prefix: str) -> str:
        return self.pattern.format(prefix=prefix, format_kind=self.format_kind, suffix=self.suffix)


@dataclass(frozen=True)
class OutputFormat:
    """Everything format-specific the source writer needs."""

    name: str
    include_directive: str
    deserializer_name: NamingTemplate
    input_parameter: str = "const char* string"
    return_type: str = "int"


_DESERIALIZE_PATTERN = "{prefix}_deserialize_from_{format_kind}_{suffix}"

OUTPUT_FORMATS: Mapping[str, OutputFormat] = MappingProxyType(
    {
        "yaml": OutputFormat(
            name="yaml",
            include_directive="#include <serdec/yaml.h>",
            deserializer_name=NamingTemplate(_DESERIALIZE_PATTERN, "yaml", "string"),
        ),
        "json": OutputFormat(
            name="json",
            include_directive="#include <serdec/json.h>",
            deserializer_name=NamingTemplate(_DESERIALIZE_PATTERN, "json", "string"),
        ),
        "xml": OutputFormat(
            name="xml",
            include_directive="#include <serdec/xml.h>",
            deserializer_name=NamingTemplate(_DESERIALIZE_PATTERN, "xml", "string"),
        ),
    }
)


def get_output_format(name: str = DEFAULT_OUTPUT_FORMAT) -> OutputFormat:
    """Return the registered profile for `name`."""
    try:
        return OUTPUT_FORMATS[name]
    except KeyError as exc:
        known = ", ".join(sorted(OUTPUT_FORMATS))
        raise UnknownOutputFormatError(
            f"Unknown output format '{name}'. Known formats: {known}"
        ) from exc
