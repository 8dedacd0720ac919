"""Command line interface entry point."""

from __future__ import annotations

import logging
import os
import sys

import click

from serdec_codegen.code_generation import (
    generate_source,
    get_output_format,
    get_property_visitor,
)
from serdec_codegen.configuration import (
    SETTINGS_PATH_ENV_VAR,
    ConfigurationError,
    load_generator_settings,
)
from serdec_codegen.licensing import get_license_notice
from serdec_codegen.naming import InvalidNameError, build_data_definition, suggest_output_name
from serdec_codegen.schema_management import SchemaError, find_undeclared_required, load_schema

_LOGGER = logging.getLogger("serdec_codegen.cli")


class CliError(Exception):
    """Custom CLI error."""


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="serdec-codegen")
@click.argument("schema_path", type=click.Path(path_type=str))
def cli(schema_path: str) -> None:
    """Generate a C deserializer skeleton for the YAML schema at SCHEMA_PATH.

    The generated source is written to standard output.
    """
    try:
        settings = load_generator_settings(os.environ.get(SETTINGS_PATH_ENV_VAR) or None)
        schema = load_schema(schema_path)
        definition = build_data_definition(schema, schema_path)
        for name in find_undeclared_required(schema):
            _LOGGER.warning("Required property '%s' is not declared in properties.", name)
        generate_source(
            definition,
            suggest_output_name(schema_path, settings.output_suffix),
            sys.stdout,
            output_format=get_output_format(settings.output_format),
            license_notice=get_license_notice(settings.license_name),
            copyright_line=settings.copyright_line,
            visitor=get_property_visitor(settings.stub_body),
        )
        sys.stdout.flush()
    except (ConfigurationError, SchemaError, InvalidNameError, OSError) as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
