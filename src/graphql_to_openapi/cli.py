"""
Command-line interface for the GraphQL to OpenAPI converter.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import typer

from .config import ConverterConfig, DEFAULT_TITLE, load_custom_plurals
from .converter import GraphQLToOpenAPIConverter
from .exceptions import ConfigError, ConverterError
from .serializer import OutputFormat

app = typer.Typer(help="Convert GraphQL schemas to OpenAPI 3.0 documents")


def _load_plurals(path: Optional[Path]) -> Dict[str, str]:
    """Load custom pluralization rules.

    Args:
        path: Path to the JSON rules file, or None

    Returns:
        The suffix replacement table, empty when no file was given

    Raises:
        typer.Exit: If the file cannot be loaded
    """
    if path is None:
        return {}
    try:
        return load_custom_plurals(path)
    except ConfigError as e:
        typer.echo(f"Error: {str(e)}", err=True)
        raise typer.Exit(1)


@app.command()
def convert(
    schema_file: Path = typer.Argument(..., help="Path to the GraphQL schema file"),
    output_file: Path = typer.Option(
        Path("openapi.yaml"), "--output", "-o", help="Output OpenAPI file"
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.YAML, "--format", help="Output format: yaml or json"
    ),
    title: str = typer.Option(DEFAULT_TITLE, help="API title"),
    version: str = typer.Option("1.0.0", help="API version"),
    base_url: str = typer.Option("", help="Base URL for the API"),
    path_prefix: str = typer.Option(
        "", help='Path prefix for all endpoints (e.g. "/api/v1")'
    ),
    detect_rest_patterns: bool = typer.Option(
        True,
        "--detect-rest-patterns/--no-detect-rest-patterns",
        help="Detect CRUD patterns and consolidate them into REST endpoints",
    ),
    pluralize_suffixes: Optional[Path] = typer.Option(
        None,
        help='Custom pluralization suffix rules as a JSON file, e.g. {"person": "people"}',
    ),
    pluralize_es_suffixes: str = typer.Option(
        "s,x,z,ch,sh", help="Comma-separated suffixes that get 'es' added"
    ),
    pluralize_ies_suffix: str = typer.Option(
        "y", help="Suffix that triggers 'ies' conversion"
    ),
    pluralize_default_suffix: str = typer.Option(
        "s", help="Default suffix to add for pluralization"
    ),
    crud_prefix_create: str = typer.Option(
        "create", help="Prefix for create operations in REST pattern detection"
    ),
    crud_prefix_update: str = typer.Option(
        "update", help="Prefix for update operations in REST pattern detection"
    ),
    crud_prefix_delete: str = typer.Option(
        "delete", help="Prefix for delete operations in REST pattern detection"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Convert a GraphQL schema to an OpenAPI document."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO, format="%(message)s"
    )

    if not schema_file.exists():
        typer.echo(f"Schema file not found: {schema_file}", err=True)
        raise typer.Exit(1)

    config = ConverterConfig(
        title=title,
        version=version,
        base_url=base_url,
        path_prefix=path_prefix,
        detect_rest_patterns=detect_rest_patterns,
        custom_plurals=_load_plurals(pluralize_suffixes),
        pluralize_es_suffixes=pluralize_es_suffixes,
        pluralize_ies_suffix=pluralize_ies_suffix,
        pluralize_default_suffix=pluralize_default_suffix,
        crud_prefix_create=crud_prefix_create,
        crud_prefix_update=crud_prefix_update,
        crud_prefix_delete=crud_prefix_delete,
    )

    try:
        converter = GraphQLToOpenAPIConverter(config)
        converter.convert_file(schema_file, output_file, output_format)
    except ConverterError as e:
        typer.echo(f"Error: {str(e)}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Successfully converted {schema_file.name} to {output_file}")


def main():
    """Entry point for the CLI."""
    app()
