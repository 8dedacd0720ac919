"""Schema document loading service."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from .schema_models import Schema, SchemaProperty

_LOGGER = logging.getLogger(__name__)

_BOOL_TAG = "tag:yaml.org,2002:bool"
_NULL_TAG = "tag:yaml.org,2002:null"
_STR_TAG = "tag:yaml.org,2002:str"


class SchemaError(Exception):
    """Raised when a schema document cannot be loaded."""


class SchemaReadError(SchemaError):
    """Raised when the schema file cannot be opened or read."""


class SchemaMalformedError(SchemaError):
    """Raised when the schema document is not valid YAML or has the wrong shape."""


class SchemaYamlLoader(yaml.SafeLoader):  # pylint: disable=too-many-ancestors
    """SafeLoader tuned for schema documents.

    Only `true`/`false` spellings resolve to booleans, so names such as `on`,
    `no` or `y` stay strings. Scalar `default` values keep their source text
    instead of being resolved to ints, floats, booleans, or dates.
    """

    def construct_mapping(self, node, deep=False):
        for key_node, value_node in node.value:
            if (
                isinstance(key_node, yaml.ScalarNode)
                and key_node.value == "default"
                and isinstance(value_node, yaml.ScalarNode)
                and value_node.tag != _NULL_TAG
            ):
                value_node.tag = _STR_TAG
        return super().construct_mapping(node, deep=deep)


SchemaYamlLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
SchemaYamlLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def load_schema(schema_path: Path | str) -> Schema:
    """Read and parse one schema document from disk."""
    path = Path(schema_path)
    try:
        with path.open(encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise SchemaReadError(f"Failed to read schema file {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise SchemaMalformedError(f"Schema file {path} is not valid UTF-8: {exc}") from exc

    _LOGGER.debug("Loaded %d characters from %s", len(text), path)
    return parse_schema(text, source=str(path))


def parse_schema(text: str, *, source: str = "<string>") -> Schema:
    """Parse schema YAML text into a Schema."""
    try:
        parsed = yaml.load(text, Loader=SchemaYamlLoader)
    except yaml.YAMLError as exc:
        raise SchemaMalformedError(f"Invalid YAML in {source}: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise SchemaMalformedError(f"Schema root in {source} must be a mapping.")

    return Schema(
        schema=_require_string(parsed, "$schema"),
        id=_require_string(parsed, "id"),
        tag=_require_string(parsed, "tag"),
        title=_require_string(parsed, "title"),
        description=_require_string(parsed, "description"),
        schema_type=_require_string(parsed, "type"),
        properties=_parse_properties(_require_key(parsed, "properties")),
        required=_parse_required(_require_key(parsed, "required")),
        additional_properties=_require_bool(parsed, "additionalProperties"),
    )


def find_undeclared_required(schema: Schema) -> tuple[str, ...]:
    """Return names listed in `required` that have no entry in `properties`."""
    return tuple(name for name in schema.required if name not in schema.properties)


def _parse_properties(value: Any) -> Mapping[str, SchemaProperty]:
    if not isinstance(value, Mapping):
        raise SchemaMalformedError("Schema field 'properties' must be a mapping.")
    properties: dict[str, SchemaProperty] = {}
    for name, definition in value.items():
        if not isinstance(name, str):
            raise SchemaMalformedError(f"Property name {name!r} must be a string.")
        properties[name] = _parse_property(name, definition)
    return MappingProxyType(properties)


def _parse_property(name: str, definition: Any) -> SchemaProperty:
    if not isinstance(definition, Mapping):
        raise SchemaMalformedError(f"Property '{name}' must be a mapping.")
    return SchemaProperty(
        schema_ref=_optional_string(definition, "$ref", f"properties.{name}"),
        property_type=_optional_string(definition, "type", f"properties.{name}"),
        description=_optional_string(definition, "description", f"properties.{name}"),
        default=_optional_default(definition.get("default"), name),
    )


def _parse_required(value: Any) -> tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise SchemaMalformedError("Schema field 'required' must be a sequence of strings.")
    for item in value:
        if not isinstance(item, str):
            raise SchemaMalformedError("Schema field 'required' must be a sequence of strings.")
    return tuple(value)


def _optional_default(value: Any, property_name: str) -> str | None:
    # SchemaYamlLoader already replaced scalar defaults with their source text.
    if value is None or isinstance(value, str):
        return value
    raise SchemaMalformedError(f"properties.{property_name}.default must be a scalar value.")


def _require_key(section: Mapping[str, Any], key: str) -> Any:
    if key not in section:
        raise SchemaMalformedError(f"Schema field '{key}' is required.")
    return section[key]


def _require_string(section: Mapping[str, Any], key: str) -> str:
    value = _require_key(section, key)
    if not isinstance(value, str):
        raise SchemaMalformedError(f"Schema field '{key}' must be a string.")
    return value


def _require_bool(section: Mapping[str, Any], key: str) -> bool:
    value = _require_key(section, key)
    if not isinstance(value, bool):
        raise SchemaMalformedError(f"Schema field '{key}' must be a boolean.")
    return value


def _optional_string(section: Mapping[str, Any], key: str, label: str) -> str | None:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise SchemaMalformedError(f"{label}.{key} must be a string.")
    return value
