"""Presets commands for browsing bundled trailer presets.

This module provides the `presets` command group with subcommands for
listing presets and showing one preset's envelope and usable zones.
"""

from typing import Annotated

import typer

from truckpack.application.presets import PresetManager, PresetNotFoundError
from truckpack.domain.services import decompose_zones
from truckpack.infrastructure import ZoneListFormatter

presets_app = typer.Typer(
    name="presets",
    help="Browse bundled trailer presets.",
)


@presets_app.command(name="list")
def list_presets() -> None:
    """List all bundled trailer presets.

    Example:
        truckpack presets list
    """
    presets = PresetManager().list_presets()

    typer.echo("Available presets:")
    typer.echo()

    max_id_width = max(len(p.id) for p in presets) if presets else 0
    for preset in presets:
        dims = f"{preset.length:g} x {preset.width:g} x {preset.height:g} in"
        typer.echo(
            f"  {preset.id:<{max_id_width}}  - {preset.label} ({dims}, "
            f"{preset.shape_mode.value})"
        )

    typer.echo()
    typer.echo("Use 'truckpack presets show <id>' to see a preset's usable zones.")


@presets_app.command(name="show")
def show_preset(
    preset_id: Annotated[
        str,
        typer.Argument(help="Identifier of the preset to show"),
    ],
) -> None:
    """Show a preset's envelope and usable zones.

    Example:
        truckpack presets show 53ft_dry_van_us_wheel_wells
    """
    manager = PresetManager()
    try:
        preset = manager.get_preset(preset_id)
    except PresetNotFoundError:
        typer.echo(f"Error: Preset '{preset_id}' not found.", err=True)
        typer.echo("Use 'truckpack presets list' to see available presets.", err=True)
        raise typer.Exit(code=1)

    container = manager.to_container(preset)
    typer.echo(f"{preset.label} [{', '.join(preset.tags)}]")
    typer.echo()
    typer.echo(ZoneListFormatter().format(container, decompose_zones(container)))
