"""Bundled trailer presets.

This module provides the PresetManager class for listing curated container
presets and applying one to an existing container.
"""

from __future__ import annotations

from dataclasses import dataclass

from truckpack.domain.value_objects import Container, ShapeMode


class PresetNotFoundError(Exception):
    """Raised when a requested trailer preset does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Preset not found: {name}")


@dataclass(frozen=True)
class TrailerPreset:
    """A named container envelope.

    Attributes:
        id: Stable preset identifier.
        label: Display label.
        length: Interior length in inches.
        width: Interior width in inches.
        height: Interior height in inches.
        shape_mode: Interior shape variant.
        tags: Free-form grouping tags.
    """

    id: str
    label: str
    length: float
    width: float
    height: float
    shape_mode: ShapeMode = ShapeMode.RECT
    tags: tuple[str, ...] = ()


DEFAULT_PRESET_ID = "default"

TRAILER_PRESETS: tuple[TrailerPreset, ...] = (
    TrailerPreset("default", "Default", 636, 102, 98, tags=("Default",)),
    TrailerPreset(
        "53ft_dry_van_us", "53 ft Dry Van (US)", 636, 102, 110, tags=("US", "Dry Van")
    ),
    TrailerPreset(
        "53ft_dry_van_us_wheel_wells",
        "53 ft Dry Van (US, Wheel Wells)",
        636,
        102,
        110,
        ShapeMode.WHEEL_WELLS,
        ("US", "Dry Van", "Wheel Wells"),
    ),
    TrailerPreset(
        "53ft_dry_van_us_front_overhang",
        "53 ft Dry Van (US, Front Overhang)",
        636,
        102,
        110,
        ShapeMode.FRONT_BONUS,
        ("US", "Dry Van", "Front Overhang"),
    ),
    TrailerPreset(
        "53ft_dry_van_low_us",
        "53 ft Dry Van (US, Low)",
        636,
        102,
        102,
        tags=("US", "Dry Van"),
    ),
    TrailerPreset(
        "48ft_dry_van_us", "48 ft Dry Van (US)", 576, 102, 110, tags=("US", "Dry Van")
    ),
    TrailerPreset(
        "40ft_dry_van_us", "40 ft Dry Van (US)", 480, 102, 110, tags=("US", "Dry Van")
    ),
    TrailerPreset(
        "26ft_box_truck_us", "26 ft Box Truck (US)", 312, 96, 96, tags=("US", "Box Truck")
    ),
    TrailerPreset(
        "24ft_box_truck_us", "24 ft Box Truck (US)", 288, 96, 96, tags=("US", "Box Truck")
    ),
    TrailerPreset(
        "20ft_box_truck_us", "20 ft Box Truck (US)", 240, 96, 96, tags=("US", "Box Truck")
    ),
    TrailerPreset(
        "16ft_box_truck_us", "16 ft Box Truck (US)", 192, 90, 84, tags=("US", "Box Truck")
    ),
    TrailerPreset(
        "sprinter_extended", "Sprinter Van (Extended)", 168, 70, 72, tags=("Van",)
    ),
)


def _positive_or(value: float | None, fallback: float) -> float:
    return value if value is not None and value > 0 else fallback


class PresetManager:
    """Manager for the bundled trailer presets.

    Example:
        manager = PresetManager()
        for preset in manager.list_presets():
            print(f"{preset.id}: {preset.label}")

        container = manager.apply("53ft_dry_van_us_wheel_wells", container)
    """

    def __init__(self, presets: tuple[TrailerPreset, ...] = TRAILER_PRESETS) -> None:
        self._presets = {preset.id: preset for preset in presets}

    def list_presets(self) -> list[TrailerPreset]:
        """All presets in declaration order."""
        return list(self._presets.values())

    def get_preset(self, preset_id: str) -> TrailerPreset:
        """Look up a preset.

        Raises:
            PresetNotFoundError: If the preset does not exist.
        """
        try:
            return self._presets[preset_id]
        except KeyError:
            raise PresetNotFoundError(preset_id) from None

    def preset_exists(self, preset_id: str) -> bool:
        return preset_id in self._presets

    def default_container(self) -> Container:
        """Container built from the default preset."""
        return self.to_container(self.get_preset(DEFAULT_PRESET_ID))

    def to_container(self, preset: TrailerPreset) -> Container:
        return Container(
            length=preset.length,
            width=preset.width,
            height=preset.height,
            shape_mode=preset.shape_mode,
        )

    def apply(self, preset_id: str, container: Container | None = None) -> Container:
        """Apply a preset's envelope and shape to a container.

        The preset's dimensions and shape mode replace the container's;
        the container's shape overrides are kept. Non-positive preset
        dimensions fall back to the container's.

        Args:
            preset_id: Preset to apply.
            container: Container to update; the default preset when None.

        Returns:
            A new Container.

        Raises:
            PresetNotFoundError: If the preset does not exist.
        """
        preset = self.get_preset(preset_id)
        base = container or self.default_container()
        return Container(
            length=_positive_or(preset.length, base.length),
            width=_positive_or(preset.width, base.width),
            height=_positive_or(preset.height, base.height),
            shape_mode=preset.shape_mode,
            shape_config=dict(base.shape_config),
        )
