"""Symbol naming derived from schema file names."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from serdec_codegen.schema_management.schema_models import Schema

_WORD_SEPARATOR = "-"


class InvalidNameError(Exception):
    """Raised when a file stem cannot be turned into C symbols."""


@dataclass(frozen=True)
class DataDefinition:
    """A loaded schema paired with the symbols generated code uses for it."""

    schema: Schema
    identifier: str
    prefix: str


def validate_stem(stem: str) -> None:
    """Reject stems whose hyphen-separated words are not all non-empty.

    Raises:
      InvalidNameError: If the stem is empty or has a leading, trailing, or
        doubled hyphen.
    """
    if not stem:
        raise InvalidNameError("Invalid Name: schema file name has an empty stem.")
    if any(not word for word in stem.split(_WORD_SEPARATOR)):
        raise InvalidNameError(
            f"Invalid Name: '{stem}' contains an empty word "
            "(leading, trailing, or repeated hyphen)."
        )


def stem_to_prefix(stem: str) -> str:
    """Return the snake_case function prefix for a stem, e.g. `bgp_neighbor`."""
    validate_stem(stem)
    return stem.replace(_WORD_SEPARATOR, "_")


def stem_to_identifier(stem: str) -> str:
    """Return the PascalCase type identifier for a stem, e.g. `BgpNeighbor`."""
    validate_stem(stem)
    return "".join(word[0].upper() + word[1:] for word in stem.split(_WORD_SEPARATOR))


def build_data_definition(schema: Schema, schema_path: Path | str) -> DataDefinition:
    """Derive naming for `schema` from the base name of the file it was loaded from."""
    stem = Path(schema_path).stem
    return DataDefinition(
        schema=schema,
        identifier=stem_to_identifier(stem),
        prefix=stem_to_prefix(stem),
    )


def suggest_output_name(schema_path: Path | str, suffix: str = ".c") -> str:
    """Return the input base name with its extension replaced by `suffix`."""
    return Path(schema_path).with_suffix(suffix).name
