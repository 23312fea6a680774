"""Configuration schema and loading system for elevation files.

This package provides JSON-based configuration loading and validation for
elevations and BOM catalogs: Pydantic models for schema validation, a
loader with comprehensive error handling, adapters to domain objects, and
save-readiness checks.

Example:
    >>> from pathlib import Path
    >>> from elevations.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("sliding-door.json"))
    ...     print(config.elevation.name)
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from elevations.application.config.adapter import (
    UnknownBomError,
    config_to_attributes,
    config_to_bom_record,
    config_to_catalog,
    config_to_elevation_records,
    resolve_selection,
)
from elevations.application.config.loader import (
    ConfigError,
    load_catalog_file,
    load_config,
    load_config_from_dict,
    validate_model,
)
from elevations.application.config.schemas import (
    SUPPORTED_VERSIONS,
    BomRecordConfig,
    CatalogConfig,
    ElevationAttributesConfig,
    ElevationConfig,
    ElevationConfiguration,
    ElevationListConfig,
    ElevationRecordConfig,
)
from elevations.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_bom_advisories,
    validate_config,
)

__all__ = [
    "BomRecordConfig",
    "CatalogConfig",
    "ConfigError",
    "ElevationAttributesConfig",
    "ElevationConfig",
    "ElevationConfiguration",
    "ElevationListConfig",
    "ElevationRecordConfig",
    "SUPPORTED_VERSIONS",
    "UnknownBomError",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_bom_advisories",
    "config_to_attributes",
    "config_to_bom_record",
    "config_to_catalog",
    "config_to_elevation_records",
    "load_catalog_file",
    "load_config",
    "load_config_from_dict",
    "resolve_selection",
    "validate_config",
    "validate_model",
]
