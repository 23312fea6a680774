"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from elevations.application.config.schemas import ElevationAttributesConfig
from elevations.application.config.schemas.base import RecordStatusConfig


class CodeRequest(ElevationAttributesConfig):
    """Attribute set to generate an elevation code for."""


class MatchRequest(BaseModel):
    """Drivers for BOM matching.

    Values are compared exactly against the catalog, so no option-set
    validation is applied here.
    """

    model_config = ConfigDict(extra="forbid")

    series: str = Field(default="", description="Series code")
    window_system: str = Field(default="", description="Window system code")
    open_direction: str = Field(default="", description="Handing to match")
    auto_match: bool = Field(
        default=True, description="Restrict candidates to matching BOMs"
    )
    search: str = Field(default="", description="BOM code or handle type filter")


class ConfigValidateRequest(BaseModel):
    """Request for validating an elevation configuration."""

    config: dict[str, Any] = Field(..., description="Elevation configuration JSON")


class SaveElevationRequest(ElevationAttributesConfig):
    """An elevation to add to the catalog."""

    name: str = Field(default="", description="Display name")
    status: RecordStatusConfig = Field(
        default=RecordStatusConfig.ACTIVE, description="Status of the saved elevation"
    )
    outer_bom_id: int | None = Field(default=None, ge=1, description="Outer BOM id")
    inner_bom_id: int | None = Field(default=None, ge=1, description="Inner BOM id")
