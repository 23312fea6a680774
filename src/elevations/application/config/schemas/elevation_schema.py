"""Elevation configuration schemas.

Attribute fields are optional so that a partially filled elevation still
loads; missing attributes are reported by the save gate during validation
rather than as schema errors.
"""

from datetime import date

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from elevations.application.config.schemas.base import (
    HingeDirectionConfig,
    InsectScreenConfig,
    InterlockingStileConfig,
    OpenDirectionConfig,
    RecordStatusConfig,
    SeriesConfig,
    SillConfig,
    WindowTypeConfig,
)
from elevations.domain.value_objects import (
    DEFAULT_GLASS_GROOVE,
    DEFAULT_LEAF_COUNT,
    GLASS_GROOVES,
    LEAF_COUNTS,
)


class ElevationAttributesConfig(BaseModel):
    """The ten elevation attributes.

    Attributes:
        series: Product line code.
        window_type: Window system code.
        no_of_leaves: Number of leaves (1, 2, 3, 4, 6 or 8).
        hinge_direction: Hinge side.
        open_direction: Swing direction.
        sill: Sill profile.
        glass_groove: Glass groove in mm (18, 24, 28 or 32).
        insect_screen: Insect screen option.
        interlocking_stile: Stile profile.
        big_opening: Big-opening variant flag.
    """

    model_config = ConfigDict(extra="forbid")

    series: SeriesConfig | None = None
    window_type: WindowTypeConfig | None = None
    no_of_leaves: int = DEFAULT_LEAF_COUNT
    hinge_direction: HingeDirectionConfig | None = None
    open_direction: OpenDirectionConfig | None = None
    sill: SillConfig | None = None
    glass_groove: int = DEFAULT_GLASS_GROOVE
    insect_screen: InsectScreenConfig | None = None
    interlocking_stile: InterlockingStileConfig | None = None
    big_opening: bool = False

    @field_validator("no_of_leaves")
    @classmethod
    def validate_leaves(cls, v: int) -> int:
        """Validate the leaf count is one of the offered counts."""
        if v not in LEAF_COUNTS:
            raise ValueError(f"no_of_leaves must be one of {list(LEAF_COUNTS)}")
        return v

    @field_validator("glass_groove")
    @classmethod
    def validate_glass_groove(cls, v: int) -> int:
        """Validate the glass groove is one of the offered widths."""
        if v not in GLASS_GROOVES:
            raise ValueError(f"glass_groove must be one of {list(GLASS_GROOVES)}")
        return v


class ElevationConfig(ElevationAttributesConfig):
    """An elevation being configured, with its BOM selection.

    Attributes:
        name: Display name; required for saving.
        status: Status given to the saved elevation.
        auto_match: Offer only BOMs matching the attributes.
        bom_search: Free-text narrowing applied to the BOM candidates.
        outer_bom_id: Selected outer BOM id.
        inner_bom_id: Selected inner BOM id.
    """

    name: str = ""
    status: RecordStatusConfig = RecordStatusConfig.ACTIVE
    auto_match: bool = True
    bom_search: str = ""
    outer_bom_id: int | None = Field(default=None, ge=1)
    inner_bom_id: int | None = Field(default=None, ge=1)


class ElevationRecordConfig(ElevationAttributesConfig):
    """A stored elevation as listed in the elevation catalog.

    Attributes:
        id: Catalog identifier.
        code: Elevation code.
        name: Display name.
        status: Catalog status.
        last_modified: Date of last change.
        outer_bom: Attached outer BOM code.
        inner_bom: Attached inner BOM code.
        wind_pressure: Rated wind pressure in Pa.
        waterproof: Rated water tightness in Pa.
        usage_count: Number of orders using the elevation.
        fab_portal_enabled: Orderable from the fabrication portal.
    """

    id: int = Field(..., ge=1)
    code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    status: RecordStatusConfig = RecordStatusConfig.ACTIVE
    last_modified: date | None = None
    outer_bom: str | None = None
    inner_bom: str | None = None
    wind_pressure: int | None = Field(default=None, ge=0)
    waterproof: int | None = Field(default=None, ge=0)
    usage_count: int = Field(default=0, ge=0)
    fab_portal_enabled: bool = False


class ElevationListConfig(BaseModel):
    """A list of stored elevations, as bundled or as exported."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str | None = Field(default=None, pattern=r"^\d+\.\d+$")
    elevations: list[ElevationRecordConfig] = Field(default_factory=list)
