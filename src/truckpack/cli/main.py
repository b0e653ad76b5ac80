"""Typer CLI for pack analysis."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from truckpack.application import AnalyzePackCommand
from truckpack.application.config import (
    ConfigError,
    config_to_container,
    load_pack_document,
)
from truckpack.cli.commands import display_load_error, presets_app, validate_command
from truckpack.domain.services import decompose_zones
from truckpack.infrastructure import JsonExporter, LoadReportFormatter, ZoneListFormatter

app = typer.Typer(
    name="truckpack",
    help="Validate cargo placements and compute load metrics for a truck.",
)

# Register validate command
app.command(name="validate")(validate_command)

# Register presets subcommand group
app.add_typer(presets_app, name="presets")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Validate cargo placements and compute load metrics for a truck."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@app.command()
def analyze(
    pack_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON pack document"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to a file"),
    ] = None,
) -> None:
    """Analyze a pack: stats, center of gravity, gauge and pallet checks.

    Exit codes:
        0 - No warnings and the center of gravity is within tolerance
        1 - The pack document could not be loaded
        2 - Out-of-gauge items, overloaded pallets, or an unbalanced load

    Example:
        truckpack analyze my-pack.json --format json
    """
    output_format = output_format.lower()
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo("Available formats: text, json", err=True)
        raise typer.Exit(code=1)

    try:
        result = AnalyzePackCommand().execute_file(pack_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    if output_format == "json":
        content = JsonExporter().export(result.report)
    else:
        content = LoadReportFormatter().format(result.report)

    if output_file is not None:
        try:
            output_file.write_text(content + "\n", encoding="utf-8")
        except OSError as e:
            typer.echo(f"Error writing report to {output_file}: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Report written to {output_file}")
    else:
        typer.echo(content)

    if result.report.has_issues:
        raise typer.Exit(code=2)


@app.command()
def zones(
    pack_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON pack document"),
    ],
) -> None:
    """List the usable zones and capacity of a pack's container.

    Example:
        truckpack zones my-pack.json
    """
    try:
        document = load_pack_document(pack_file)
        container = config_to_container(document.container, document.preset)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    typer.echo(ZoneListFormatter().format(container, decompose_zones(container)))


if __name__ == "__main__":
    app()
