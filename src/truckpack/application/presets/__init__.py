"""Trailer preset catalog."""

from truckpack.application.presets.manager import (
    DEFAULT_PRESET_ID,
    TRAILER_PRESETS,
    PresetManager,
    PresetNotFoundError,
    TrailerPreset,
)

__all__ = [
    "DEFAULT_PRESET_ID",
    "PresetManager",
    "PresetNotFoundError",
    "TRAILER_PRESETS",
    "TrailerPreset",
]
