"""Generator settings loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from serdec_codegen.code_generation.output_formats import OUTPUT_FORMATS
from serdec_codegen.code_generation.source_writer import PROPERTY_VISITORS
from serdec_codegen.licensing.license_notices import LICENSE_NOTICES

from .generator_settings import DEFAULT_GENERATOR_SETTINGS, GeneratorSettings


class ConfigurationError(Exception):
    """Raised when the generator settings file is invalid."""


def load_generator_settings(config_path: Path | str | None) -> GeneratorSettings:
    """Load generator settings, falling back to defaults when no path is given."""
    if config_path is None:
        return DEFAULT_GENERATOR_SETTINGS

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Settings file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse settings file: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Settings root must be a mapping.")

    section = parsed.get("generator") or {}
    if not isinstance(section, Mapping):
        raise ConfigurationError("Settings section 'generator' must be a mapping.")

    defaults = DEFAULT_GENERATOR_SETTINGS
    license_name = _optional_string(section, "license", defaults.license_name)
    if license_name not in LICENSE_NOTICES:
        raise ConfigurationError(
            f"generator.license '{license_name}' is not one of: {', '.join(sorted(LICENSE_NOTICES))}"
        )
    output_format = _optional_string(section, "output_format", defaults.output_format)
    if output_format not in OUTPUT_FORMATS:
        raise ConfigurationError(
            f"generator.output_format '{output_format}' is not one of: "
            f"{', '.join(sorted(OUTPUT_FORMATS))}"
        )
    output_suffix = _optional_string(section, "output_suffix", defaults.output_suffix)
    if not output_suffix.startswith(".") or len(output_suffix) < 2:
        raise ConfigurationError("generator.output_suffix must look like '.c'.")
    stub_body = _optional_string(section, "stub_body", defaults.stub_body)
    if stub_body not in PROPERTY_VISITORS:
        raise ConfigurationError(
            f"generator.stub_body '{stub_body}' is not one of: "
            f"{', '.join(sorted(PROPERTY_VISITORS))}"
        )

    return GeneratorSettings(
        license_name=license_name,
        copyright_line=_optional_string(section, "copyright", defaults.copyright_line),
        output_format=output_format,
        output_suffix=output_suffix,
        stub_body=stub_body,
    )


def _optional_string(section: Mapping[str, Any], key: str, default: str) -> str:
    value = section.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigurationError(f"generator.{key} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"generator.{key} must not be empty.")
    return stripped
