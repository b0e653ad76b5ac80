"""Integration tests for the presets CLI commands."""

import pytest
from typer.testing import CliRunner

from truckpack.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestPresetsList:
    """Tests for the presets list command."""

    def test_lists_all_presets(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["presets", "list"])

        assert result.exit_code == 0
        assert "Available presets:" in result.output
        assert "default" in result.output
        assert "53ft_dry_van_us_wheel_wells" in result.output
        assert "sprinter_extended" in result.output
        assert "wheelWells" in result.output


class TestPresetsShow:
    """Tests for the presets show command."""

    def test_show_wheel_well_preset(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["presets", "show", "53ft_dry_van_us_wheel_wells"])

        assert result.exit_code == 0
        assert "53 ft Dry Van (US, Wheel Wells)" in result.output
        assert "USABLE ZONES" in result.output
        assert "636 x 102 x 110 in (wheelWells)" in result.output

    def test_show_unknown_preset(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["presets", "show", "hovercraft"])

        assert result.exit_code == 1
        assert "Preset 'hovercraft' not found" in result.output
