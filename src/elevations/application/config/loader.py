"""Configuration file loader with comprehensive error handling.

This module loads and parses JSON configuration files for elevations and
BOM catalogs. It handles file system errors, JSON parsing errors, and
Pydantic validation errors with clear, actionable error messages.
"""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from elevations.application.config.schemas import (
    CatalogConfig,
    ElevationConfiguration,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("elevation", "series"))
        'elevation.series'
        >>> _format_json_path(("catalog", "outer_boms", 0, "bom_code"))
        'catalog.outer_boms[0].bom_code'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Flatten a Pydantic ValidationError into path/message/value dicts."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def _read_json(path: Path) -> Any:
    """Read and parse a JSON file, translating failures into ConfigError."""
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )


def validate_model(model: type[M], data: Any, path: Path | None = None) -> M:
    """Validate data against a schema model, raising ConfigError on failure."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> ElevationConfiguration:
    """Load and validate an elevation configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated ElevationConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated. The
            error_type attribute indicates the specific error category.

    Example:
        >>> try:
        ...     config = load_config(Path("sliding-door.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    data = _read_json(path)
    config = validate_model(ElevationConfiguration, data, path)
    logger.debug(f"Loaded elevation config from {path}")
    return config


def load_config_from_dict(data: dict[str, Any]) -> ElevationConfiguration:
    """Load and validate an elevation configuration from a dictionary.

    Useful for API requests or programmatic configuration.

    Raises:
        ConfigError: If the data fails validation.
    """
    return validate_model(ElevationConfiguration, data)


def load_catalog_file(path: Path) -> CatalogConfig:
    """Load and validate a standalone BOM catalog JSON file.

    Raises:
        ConfigError: If the file cannot be loaded or validated.
    """
    data = _read_json(path)
    catalog = validate_model(CatalogConfig, data, path)
    logger.debug(
        f"Loaded catalog from {path}: {len(catalog.outer_boms)} outer, "
        f"{len(catalog.inner_boms)} inner, {len(catalog.connector_boms)} connector"
    )
    return catalog
