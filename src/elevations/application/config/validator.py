"""Validation structures and save-readiness checks for elevation configs.

Schema validation happens while loading; this module checks whether a
loaded elevation could be saved against a catalog, and raises advisories
about its BOM selection.
"""

from dataclasses import dataclass, field
from typing import Any

from elevations.application.config.adapter import (
    UnknownBomError,
    config_to_attributes,
    resolve_selection,
)
from elevations.application.config.schemas import ElevationConfiguration
from elevations.domain.entities import BomCatalog
from elevations.domain.services import (
    ReasonCode,
    candidate_boms,
    validate_draft,
)
from elevations.domain.value_objects import BomType


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "elevation.series")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


_SELECTION_PATHS = {
    "outer": "elevation.outer_bom_id",
    "inner": "elevation.inner_bom_id",
}


def check_bom_advisories(
    config: ElevationConfiguration, catalog: BomCatalog
) -> ValidationResult:
    """Warn about empty auto-match results and off-match selections.

    Only applies when auto-match is enabled.
    """
    result = ValidationResult()
    elevation = config.elevation
    if not elevation.auto_match:
        return result

    attrs = config_to_attributes(elevation)
    for bom_type, half, selected_id in (
        (BomType.OUTER, "outer", elevation.outer_bom_id),
        (BomType.INNER, "inner", elevation.inner_bom_id),
    ):
        candidates = candidate_boms(
            catalog.by_type(bom_type), attrs, bom_type, True, elevation.bom_search
        )
        if not candidates:
            result.add_warning(
                path=_SELECTION_PATHS[half],
                message=(
                    f"No {half} BOMs match series '{attrs.series}', "
                    f"window type '{attrs.window_type}', "
                    f"open direction '{attrs.open_direction}'"
                ),
                suggestion="Disable auto_match to choose from the full catalog",
            )
        elif selected_id is not None and selected_id not in {b.id for b in candidates}:
            result.add_warning(
                path=_SELECTION_PATHS[half],
                message=f"Selected {half} BOM {selected_id} is not among the matched BOMs",
            )
    return result


def validate_config(
    config: ElevationConfiguration, catalog: BomCatalog
) -> ValidationResult:
    """Check that the configured elevation could be saved.

    Args:
        config: A loaded configuration.
        catalog: The catalog BOM ids are resolved against.

    Returns:
        Errors for missing fields, missing or unknown BOM selections, and
        warnings from ``check_bom_advisories``.
    """
    result = ValidationResult()
    elevation = config.elevation

    try:
        outer_bom, inner_bom = resolve_selection(elevation, catalog)
    except UnknownBomError as e:
        half = "outer" if e.bom_type is BomType.OUTER else "inner"
        return result.add_error(_SELECTION_PATHS[half], str(e), e.bom_id)

    outcome = validate_draft(
        config_to_attributes(elevation), elevation.name, outer_bom, inner_bom
    )
    if outcome.reason is ReasonCode.INCOMPLETE_ATTRIBUTES:
        for name in outcome.missing_fields:
            result.add_error(f"elevation.{name}", "Field is required")
    elif outcome.reason is ReasonCode.MISSING_BOM_SELECTION:
        for half in outcome.missing_selections:
            result.add_error(_SELECTION_PATHS[half], f"No {half} BOM selected")

    return result.merge(check_bom_advisories(config, catalog))
