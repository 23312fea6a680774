"""Tests for save-readiness validation of configurations."""

from pathlib import Path

from elevations.application.config import (
    check_bom_advisories,
    config_to_catalog,
    load_config,
    validate_config,
)
from elevations.domain.entities import BomCatalog, BomRecord
from elevations.domain.value_objects import BomType


class TestValidateConfig:
    """Tests for validate_config."""

    def test_valid_config(self, fixtures_path: Path, catalog: BomCatalog) -> None:
        result = validate_config(load_config(fixtures_path / "valid.json"), catalog)

        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_missing_fields_are_errors(
        self, fixtures_path: Path, catalog: BomCatalog
    ) -> None:
        result = validate_config(
            load_config(fixtures_path / "missing_fields.json"), catalog
        )

        assert not result.is_valid
        assert result.exit_code == 1
        paths = [e.path for e in result.errors]
        assert "elevation.hinge_direction" in paths
        assert "elevation.series" not in paths

    def test_missing_bom_selection(
        self, fixtures_path: Path, catalog: BomCatalog
    ) -> None:
        result = validate_config(load_config(fixtures_path / "missing_bom.json"), catalog)

        assert [e.path for e in result.errors] == ["elevation.inner_bom_id"]
        assert result.errors[0].message == "No inner BOM selected"

    def test_unknown_bom_id(self, fixtures_path: Path, catalog: BomCatalog) -> None:
        result = validate_config(load_config(fixtures_path / "unknown_bom.json"), catalog)

        assert not result.is_valid
        assert result.errors[0].path == "elevation.outer_bom_id"
        assert result.errors[0].value == 99

    def test_config_catalog_is_used(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "with_catalog.json")
        assert config.catalog is not None

        result = validate_config(config, config_to_catalog(config.catalog))
        assert result.is_valid


class TestBomAdvisories:
    """Tests for check_bom_advisories."""

    def test_no_candidates_warns(self, fixtures_path: Path, catalog: BomCatalog) -> None:
        result = validate_config(
            load_config(fixtures_path / "with_warnings.json"), catalog
        )

        assert result.is_valid
        assert result.exit_code == 2
        assert {w.path for w in result.warnings} == {
            "elevation.outer_bom_id",
            "elevation.inner_bom_id",
        }
        assert "No outer BOMs match" in result.warnings[0].message
        assert result.warnings[0].suggestion is not None

    def test_auto_match_off_skips_advisories(
        self, fixtures_path: Path, catalog: BomCatalog
    ) -> None:
        result = check_bom_advisories(load_config(fixtures_path / "valid.json"), catalog)
        assert result.warnings == []

    def test_selection_outside_matches_warns(self, fixtures_path: Path) -> None:
        def bom(bom_id: int, bom_type: BomType, direction: str) -> BomRecord:
            return BomRecord(
                id=bom_id,
                bom_code=f"{bom_type.value}-{bom_id}",
                series_code="IWS",
                window_system="SD",
                bom_type=bom_type,
                frame_depth=75,
                open_direction=direction,
                handle_type="Single Lock",
            )

        catalog = BomCatalog(
            outer=(bom(1, BomType.OUTER, "Out"), bom(2, BomType.OUTER, "IN")),
            inner=(bom(1, BomType.INNER, "IN"),),
        )
        result = validate_config(
            load_config(fixtures_path / "with_warnings.json"), catalog
        )

        assert result.is_valid
        assert [w.path for w in result.warnings] == ["elevation.outer_bom_id"]
        assert result.warnings[0].message == (
            "Selected outer BOM 1 is not among the matched BOMs"
        )
