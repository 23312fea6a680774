"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class CodeResponseSchema(BaseModel):
    """Response for code generation."""

    code: str = Field(..., description="Elevation code, empty when incomplete")
    complete: bool = Field(..., description="Whether all required fields are set")
    missing_fields: list[str] = Field(
        default_factory=list, description="Required fields still unset"
    )


class BomSchema(BaseModel):
    """A BOM catalog record."""

    id: int = Field(..., description="BOM id within its type")
    bom_code: str = Field(..., description="BOM code")
    series_code: str = Field(..., description="Series code")
    window_system: str = Field(..., description="Window system")
    bom_type: str = Field(..., description="outer, inner or connector")
    frame_depth: int = Field(..., description="Frame depth in mm")
    open_direction: str = Field(..., description="Handing: L, R or LR")
    handle_type: str = Field(..., description="Handle type")
    status: str = Field(..., description="Catalog status")
    glass_groove: int | None = Field(default=None, description="Glass groove in mm")
    bom_name: str | None = Field(default=None, description="Descriptive name")
    total_parts: int | None = Field(default=None, description="Number of parts")
    last_modified: str | None = Field(default=None, description="ISO date")


class MatchResultSchema(BaseModel):
    """Response for BOM matching."""

    outer: list[BomSchema] = Field(default_factory=list, description="Outer BOMs")
    inner: list[BomSchema] = Field(default_factory=list, description="Inner BOMs")
    outer_count: int = Field(..., description="Number of outer BOMs")
    inner_count: int = Field(..., description="Number of inner BOMs")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether the elevation can be saved")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ElevationSchema(BaseModel):
    """An elevation catalog record."""

    id: int
    code: str
    name: str
    attributes: dict[str, Any]
    status: str
    last_modified: str | None = None
    outer_bom: str | None = None
    inner_bom: str | None = None
    wind_pressure: int | None = None
    waterproof: int | None = None
    usage_count: int = 0
    fab_portal_enabled: bool = False


class ElevationListSchema(BaseModel):
    """Response for the elevation listing."""

    elevations: list[ElevationSchema] = Field(..., description="Matching elevations")
    statistics: dict[str, Any] = Field(..., description="Counts over the catalog")


class BomListSchema(BaseModel):
    """Response for the BOM catalog listing."""

    boms: list[BomSchema] = Field(..., description="Matching BOMs")
    statistics: dict[str, Any] = Field(..., description="Counts over the catalog")


class OptionsSchema(BaseModel):
    """Allowed values for every elevation attribute."""

    options: dict[str, list[Any]] = Field(..., description="Values per attribute")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
