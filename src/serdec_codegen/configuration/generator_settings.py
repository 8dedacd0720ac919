"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass

from serdec_codegen.code_generation.constants import DEFAULT_COPYRIGHT_LINE
from serdec_codegen.code_generation.output_formats import DEFAULT_OUTPUT_FORMAT
from serdec_codegen.code_generation.source_writer import DEFAULT_STUB_BODY
from serdec_codegen.licensing.license_notices import DEFAULT_LICENSE_NAME

SETTINGS_PATH_ENV_VAR = "SERDEC_CODEGEN_CONFIG"


@dataclass(frozen=True)
class GeneratorSettings:
    """Normalized code generator settings."""

    license_name: str = DEFAULT_LICENSE_NAME
    copyright_line: str = DEFAULT_COPYRIGHT_LINE
    output_format: str = DEFAULT_OUTPUT_FORMAT
    output_suffix: str = ".c"
    stub_body: str = DEFAULT_STUB_BODY


DEFAULT_GENERATOR_SETTINGS = GeneratorSettings()
