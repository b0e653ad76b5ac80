"""FastAPI dependency injection for analysis services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from truckpack.application import AnalyzePackCommand
from truckpack.application.presets import PresetManager


@lru_cache(maxsize=1)
def get_preset_manager() -> PresetManager:
    """Get cached PresetManager instance."""
    return PresetManager()


def get_analyze_command(
    presets: Annotated[PresetManager, Depends(get_preset_manager)],
) -> AnalyzePackCommand:
    """Dependency for AnalyzePackCommand."""
    return AnalyzePackCommand(preset_manager=presets)


# Type aliases for cleaner endpoint signatures
PresetManagerDep = Annotated[PresetManager, Depends(get_preset_manager)]
AnalyzeCommandDep = Annotated[AnalyzePackCommand, Depends(get_analyze_command)]
