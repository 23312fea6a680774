"""Pytest configuration and shared fixtures for elevation tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from elevations.application.data import load_default_catalog
from elevations.domain.entities import BomCatalog, BomRecord
from elevations.domain.value_objects import BomType, ElevationAttributes

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def complete_attrs() -> ElevationAttributes:
    """The two-leaf IWS sliding door used throughout the examples."""
    return ElevationAttributes(
        series="IWS",
        window_type="SD",
        no_of_leaves=2,
        hinge_direction="R",
        open_direction="IN",
        sill="Step",
        glass_groove=18,
        insect_screen="IS",
        interlocking_stile="A",
        big_opening=True,
    )


@pytest.fixture
def catalog() -> BomCatalog:
    """The bundled BOM catalog."""
    return load_default_catalog()


@pytest.fixture
def outer_bom(catalog: BomCatalog) -> BomRecord:
    bom = catalog.find(BomType.OUTER, 1)
    assert bom is not None
    return bom


@pytest.fixture
def inner_bom(catalog: BomCatalog) -> BomRecord:
    bom = catalog.find(BomType.INNER, 1)
    assert bom is not None
    return bom


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH
