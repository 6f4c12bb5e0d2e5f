"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click

from response_schema_validator.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_document,
    load_issue_styles,
    write_placeholder_configuration,
)
from response_schema_validator.mismatch_annotation import SchemaCompilationError
from response_schema_validator.schema_resolution import (
    PathLocator,
    SchemaResolutionError,
    classify_document,
    resolve_schema_definition,
)
from response_schema_validator.validation_run import MissingSchemaError, validate_schema

_LOG_FORMAT = "%(asctime)s [%(levelname)8s] %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="response-schema-validator")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
def cli(verbose: bool) -> None:
    """Validate API responses against JSON schemas, Swagger or OpenAPI documents."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=_LOG_FORMAT, stream=sys.stderr)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML issue style configuration to write",
)
def generate_config(output_path: str) -> None:
    """Generate an issue style YAML configuration with the default icons and colors."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="validate")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a JSON schema, Swagger or OpenAPI document (YAML/JSON)",
)
@click.option(
    "--data",
    "data_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the data to validate (YAML/JSON)",
)
@click.option("--endpoint", required=False, help="Endpoint path inside a specification document")
@click.option("--method", required=False, help="HTTP method  [default: GET]")
@click.option("--status", required=False, type=int, help="Response status code  [default: 200]")
@click.option(
    "--styles",
    "styles_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to an issue style configuration (YAML/JSON)",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the validation outcome JSON to this file instead of stdout",
)
# pylint: disable=too-many-arguments,too-many-positional-arguments
def validate(
    schema_path: str,
    data_path: str,
    endpoint: str | None,
    method: str | None,
    status: int | None,
    styles_path: str | None,
    output_path: str | None,
) -> int:
    """Validate data and print the errors with the annotated data."""
    try:
        schema = load_document(schema_path)
        data = load_document(data_path)
        issue_styles = load_issue_styles(styles_path) if styles_path else None
        locator = _build_locator(schema, endpoint, method, status)
        outcome = validate_schema(data, schema, locator, issue_styles)
    except (
        ConfigurationError,
        MissingSchemaError,
        SchemaResolutionError,
        SchemaCompilationError,
    ) as exc:
        raise CliError(str(exc)) from exc

    _emit_json(outcome.to_dict(), output_path)
    return 0 if outcome.is_valid else 1


@cli.command(name="resolve")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a Swagger or OpenAPI document (YAML/JSON)",
)
@click.option("--endpoint", required=True, help="Endpoint path inside the document")
@click.option("--method", required=False, help="HTTP method  [default: GET]")
@click.option("--status", required=False, type=int, help="Response status code  [default: 200]")
def resolve(schema_path: str, endpoint: str, method: str | None, status: int | None) -> None:
    """Print the self-contained response schema for one endpoint."""
    try:
        document = classify_document(load_document(schema_path))
        if not document.is_specification:
            raise CliError(f"Not a Swagger or OpenAPI document: {schema_path}")
        locator = PathLocator(endpoint=endpoint, method=method, status=status).apply_defaults()
        resolved = resolve_schema_definition(document, locator)
    except (ConfigurationError, SchemaResolutionError) as exc:
        raise CliError(str(exc)) from exc
    _emit_json(resolved, None)


def _build_locator(
    schema: Any, endpoint: str | None, method: str | None, status: int | None
) -> PathLocator | None:
    if endpoint is None and method is None and status is None:
        if schema is not None and classify_document(schema).is_specification:
            raise CliError("--endpoint is required for Swagger and OpenAPI documents.")
        return None
    return PathLocator(endpoint=endpoint, method=method, status=status)


def _emit_json(payload: Any, output_path: str | None) -> None:
    text = json.dumps(payload, ensure_ascii=False, indent=2, default=str)
    if output_path is None:
        click.echo(text)
        return
    try:
        Path(output_path).write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(Path(output_path).resolve()))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        result = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
