"""Schema management exports."""

from .schema_loader import (
    SchemaError,
    SchemaMalformedError,
    SchemaReadError,
    find_undeclared_required,
    load_schema,
    parse_schema,
)
from .schema_models import Schema, SchemaProperty

__all__ = [
    "Schema",
    "SchemaProperty",
    "SchemaError",
    "SchemaMalformedError",
    "SchemaReadError",
    "find_undeclared_required",
    "load_schema",
    "parse_schema",
]
