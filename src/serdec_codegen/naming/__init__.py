"""Naming derivation exports."""

from .identifier_naming import (
    DataDefinition,
    InvalidNameError,
    build_data_definition,
    stem_to_identifier,
    stem_to_prefix,
    suggest_output_name,
    validate_stem,
)

__all__ = [
    "DataDefinition",
    "InvalidNameError",
    "build_data_definition",
    "stem_to_identifier",
    "stem_to_prefix",
    "suggest_output_name",
    "validate_stem",
]
