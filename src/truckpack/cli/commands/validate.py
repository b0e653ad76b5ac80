"""Validate command for checking pack documents.

This module provides the `validate` command that checks a JSON pack
document for syntax and schema errors without running the analysis, and
the error display shared by every command that loads a document.
"""

from pathlib import Path
from typing import Annotated

import typer

from truckpack.application.config import (
    ConfigError,
    config_to_container,
    load_pack_document,
)


def display_load_error(error: ConfigError) -> None:
    """Display a pack document loading error on stderr.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type in ("validation", "unknown_preset"):
        for detail in error.details:
            path = detail.get("path") or "<root>"
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def validate_command(
    pack_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON pack document to validate"),
    ],
) -> None:
    """Validate a pack document.

    Checks the document for:
    - JSON syntax errors
    - Schema errors (missing fields, unknown fields, negative weights, etc.)
    - Unknown trailer presets
    - Instances referencing items missing from the catalog (warning only)

    Exit codes:
        0 - Document is valid with no warnings
        1 - Document has errors (cannot be analyzed)
        2 - Document is valid but has warnings

    Example:
        truckpack validate my-pack.json
    """
    typer.echo(f"Validating {pack_file}...")
    typer.echo()

    try:
        document = load_pack_document(pack_file)
        config_to_container(document.container, document.preset)
    except ConfigError as e:
        display_load_error(e)
        typer.echo(err=True)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    catalog_ids = {item.id for item in document.catalog}
    dangling = [
        inst for inst in document.instances if inst.catalog_item_id not in catalog_ids
    ]

    if dangling:
        typer.echo("Warnings:")
        for inst in dangling:
            typer.echo(
                f"  instances.{inst.id}: unknown catalog item "
                f"'{inst.catalog_item_id}' (ignored by analysis)"
            )
        typer.echo()
        typer.echo(f"Validation passed with {len(dangling)} warning(s)")
        raise typer.Exit(code=2)

    typer.echo("Validation passed. Pack document is valid.")
