"""CLI command implementations for the truckpack application.

This package contains subcommands for the truckpack CLI, including:
- validate: Validate a pack document
- presets: Browse bundled trailer presets
"""

from truckpack.cli.commands.presets import presets_app
from truckpack.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "presets_app", "validate_command"]
