"""Tests for the configuration schemas."""

import pytest
from pydantic import ValidationError

from elevations.application.config import (
    BomRecordConfig,
    CatalogConfig,
    ElevationConfig,
    ElevationConfiguration,
)
from elevations.domain.value_objects import HingeDirection, Series


class TestElevationConfig:
    """Tests for ElevationConfig."""

    def test_minimal(self) -> None:
        config = ElevationConfig()

        assert config.series is None
        assert config.no_of_leaves == 1
        assert config.glass_groove == 18
        assert config.auto_match is True
        assert config.outer_bom_id is None

    def test_enum_values_parsed(self) -> None:
        config = ElevationConfig(series="IWS", hinge_direction="None")

        assert config.series is Series.IWS
        assert config.hinge_direction is HingeDirection.NONE

    def test_unknown_option_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ElevationConfig(series="XYZ")

    @pytest.mark.parametrize("leaves", [0, 5, 7, 10])
    def test_leaf_count_must_be_offered(self, leaves: int) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ElevationConfig(no_of_leaves=leaves)
        assert "no_of_leaves must be one of" in str(exc_info.value)

    def test_glass_groove_must_be_offered(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ElevationConfig(glass_groove=20)
        assert "glass_groove must be one of" in str(exc_info.value)

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            ElevationConfig(colour="white")

    def test_bom_ids_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            ElevationConfig(outer_bom_id=0)


class TestCatalogConfig:
    """Tests for CatalogConfig and BomRecordConfig."""

    def _record(self, **overrides: object) -> dict:
        data = {
            "id": 1,
            "bom_code": "X-1",
            "series_code": "IWS",
            "window_system": "SD",
            "frame_depth": 75,
            "open_direction": "L",
            "handle_type": "Single Lock",
        }
        data.update(overrides)
        return data

    def test_open_direction_is_handing(self) -> None:
        with pytest.raises(ValidationError):
            BomRecordConfig(**self._record(open_direction="IN"))

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CatalogConfig(outer_boms=[self._record(), self._record(bom_code="X-2")])
        assert "duplicate BOM id 1" in str(exc_info.value)

    def test_same_id_allowed_across_lists(self) -> None:
        config = CatalogConfig(outer_boms=[self._record()], inner_boms=[self._record()])
        assert len(config.inner_boms) == 1

    def test_bom_type_must_match_list(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CatalogConfig(inner_boms=[self._record(bom_type="outer")])
        assert "listed as 'inner'" in str(exc_info.value)


class TestElevationConfiguration:
    """Tests for the root configuration model."""

    def test_supported_version(self) -> None:
        config = ElevationConfiguration(schema_version="1.0", elevation={})
        assert config.catalog is None

    def test_newer_minor_version_accepted(self) -> None:
        config = ElevationConfiguration(schema_version="1.9", elevation={})
        assert config.schema_version == "1.9"

    def test_unsupported_major_version(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ElevationConfiguration(schema_version="2.0", elevation={})
        assert "Unsupported schema version" in str(exc_info.value)

    def test_malformed_version(self) -> None:
        with pytest.raises(ValidationError):
            ElevationConfiguration(schema_version="one", elevation={})
