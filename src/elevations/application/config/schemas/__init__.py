"""Pydantic schemas for elevation configuration files."""

from elevations.application.config.schemas.base import SUPPORTED_VERSIONS
from elevations.application.config.schemas.catalog_schema import (
    BomRecordConfig,
    CatalogConfig,
)
from elevations.application.config.schemas.elevation_schema import (
    ElevationAttributesConfig,
    ElevationConfig,
    ElevationListConfig,
    ElevationRecordConfig,
)
from elevations.application.config.schemas.root import ElevationConfiguration

__all__ = [
    "BomRecordConfig",
    "CatalogConfig",
    "ElevationAttributesConfig",
    "ElevationConfig",
    "ElevationConfiguration",
    "ElevationListConfig",
    "ElevationRecordConfig",
    "SUPPORTED_VERSIONS",
]
