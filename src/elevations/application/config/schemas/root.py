"""Root configuration schema.

This module contains the root ElevationConfiguration model which represents
the top-level structure of an elevation configuration file.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from elevations.application.config.schemas.base import SUPPORTED_VERSIONS
from elevations.application.config.schemas.catalog_schema import CatalogConfig
from elevations.application.config.schemas.elevation_schema import ElevationConfig


class ElevationConfiguration(BaseModel):
    """Root configuration model for an elevation file.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        elevation: The elevation being configured
        catalog: Optional BOM catalog; the bundled catalog is used when omitted

    Example:
        >>> config = ElevationConfiguration(
        ...     schema_version="1.0",
        ...     elevation=ElevationConfig(name="Sliding Door", series="IWS"),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    elevation: ElevationConfig
    catalog: CatalogConfig | None = Field(
        default=None, description="BOM catalog (optional)"
    )

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
