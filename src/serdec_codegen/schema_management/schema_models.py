"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class SchemaProperty:
    """One declared property of a schema object."""

    schema_ref: str | None = None
    property_type: str | None = None
    description: str | None = None
    default: str | None = None


@dataclass(frozen=True)
class Schema:  # pylint: disable=too-many-instance-attributes
    """Structured representation of one schema document."""

    schema: str
    id: str
    tag: str
    title: str
    description: str
    schema_type: str
    properties: Mapping[str, SchemaProperty]
    required: tuple[str, ...]
    additional_properties: bool
