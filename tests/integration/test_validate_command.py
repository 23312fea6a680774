"""Integration tests for the validate CLI command.

These tests verify the validate command end-to-end, including:
- Valid configuration files pass validation
- Schema problems and unsaveable elevations produce errors
- BOM-matching advisories are displayed as warnings
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from elevations.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_config(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid.json")])

        assert result.exit_code == 0
        assert "Validation passed. Elevation is ready to save." in result.output

    def test_warnings_exit_code(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "with_warnings.json")]
        )

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "No outer BOMs match series 'IWS'" in result.output
        assert "Suggestion: Disable auto_match" in result.output
        assert "Validation passed with 2 warning(s)" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 6" in result.output
        assert "Validation failed." in result.output

    def test_unknown_field_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "unknown_field.json")]
        )

        assert result.exit_code == 1
        assert "elevation.colour" in result.output

    def test_invalid_option_shows_value(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "invalid_option.json")]
        )

        assert result.exit_code == 1
        assert "elevation.series" in result.output
        assert "Value: 'XYZ'" in result.output

    def test_missing_fields(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "missing_fields.json")]
        )

        assert result.exit_code == 1
        assert "elevation.hinge_direction: Field is required" in result.output
        assert "Validation failed: 5 error(s), 0 warning(s)" in result.output

    def test_missing_bom(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "missing_bom.json")])

        assert result.exit_code == 1
        assert "elevation.inner_bom_id: No inner BOM selected" in result.output

    def test_unknown_bom(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "unknown_bom.json")])

        assert result.exit_code == 1
        assert "No outer BOM with id 99 in catalog" in result.output

    def test_catalog_option(self, runner: CliRunner) -> None:
        """BOM ids resolve against the catalog given on the command line."""
        result = runner.invoke(
            app,
            [
                "validate",
                str(FIXTURES_PATH / "valid.json"),
                "--catalog",
                str(FIXTURES_PATH / "catalog_small.json"),
            ],
        )

        assert result.exit_code == 0

    def test_embedded_catalog(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "with_catalog.json")]
        )
        assert result.exit_code == 0
