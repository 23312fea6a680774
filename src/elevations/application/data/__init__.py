"""Bundled reference data: the BOM catalog and the sample elevation list.

Both files are validated with the same schemas as user-supplied
configuration and converted to domain objects once per process.
"""

import json
from functools import lru_cache
from importlib import resources

from elevations.application.config.adapter import (
    config_to_catalog,
    config_to_elevation_records,
)
from elevations.application.config.loader import validate_model
from elevations.application.config.schemas import CatalogConfig, ElevationListConfig
from elevations.domain.entities import BomCatalog, ElevationRecord

_DATA_PACKAGE = "elevations.application.data"


def _read(filename: str) -> object:
    data_file = resources.files(_DATA_PACKAGE).joinpath(filename)
    return json.loads(data_file.read_text(encoding="utf-8"))


@lru_cache(maxsize=1)
def load_default_catalog() -> BomCatalog:
    """The bundled BOM catalog."""
    return config_to_catalog(validate_model(CatalogConfig, _read("catalog.json")))


@lru_cache(maxsize=1)
def load_sample_elevations() -> tuple[ElevationRecord, ...]:
    """The bundled sample elevation records."""
    config = validate_model(ElevationListConfig, _read("elevations.json"))
    return tuple(config_to_elevation_records(config))


__all__ = ["load_default_catalog", "load_sample_elevations"]
