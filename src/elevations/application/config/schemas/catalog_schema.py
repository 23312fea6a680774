"""BOM catalog configuration schemas.

A catalog is three ordered lists of BOM records. Record ids must be unique
within a list, and a record's ``bom_type`` (when given) must agree with the
list it appears in.
"""

from datetime import date

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)

from elevations.application.config.schemas.base import (
    BomOpenDirectionConfig,
    BomTypeConfig,
    RecordStatusConfig,
)


class BomRecordConfig(BaseModel):
    """Configuration for a single BOM catalog record.

    Attributes:
        id: Identifier, unique within its catalog list.
        bom_code: Display code.
        series_code: Product line code.
        window_system: Window system code.
        bom_type: Outer, inner or connector. Defaults to the list's type.
        frame_depth: Frame depth in mm.
        open_direction: Handing (L, R or LR).
        handle_type: Handle hardware description.
        glass_groove: Glass groove in mm, for inner BOMs.
        bom_name: Optional descriptive name.
        total_parts: Optional part count.
        status: Catalog status.
        last_modified: Date of last change.
    """

    model_config = ConfigDict(extra="forbid")

    id: int = Field(..., ge=1)
    bom_code: str = Field(..., min_length=1)
    series_code: str = Field(..., min_length=1)
    window_system: str = Field(..., min_length=1)
    bom_type: BomTypeConfig | None = None
    frame_depth: int = Field(..., gt=0, le=500)
    open_direction: BomOpenDirectionConfig
    handle_type: str = Field(..., min_length=1)
    glass_groove: int | None = Field(default=None, gt=0, le=100)
    bom_name: str | None = None
    total_parts: int | None = Field(default=None, ge=0)
    status: RecordStatusConfig = RecordStatusConfig.ACTIVE
    last_modified: date | None = None


def _check_list(
    records: list[BomRecordConfig], bom_type: BomTypeConfig, list_name: str
) -> None:
    seen: set[int] = set()
    for record in records:
        if record.id in seen:
            raise ValueError(f"{list_name}: duplicate BOM id {record.id}")
        seen.add(record.id)
        if record.bom_type is not None and record.bom_type != bom_type:
            raise ValueError(
                f"{list_name}: BOM {record.bom_code} has bom_type "
                f"'{record.bom_type.value}' but is listed as '{bom_type.value}'"
            )


class CatalogConfig(BaseModel):
    """Configuration for the BOM reference catalog.

    Attributes:
        outer_boms: Outer BOM records in display order.
        inner_boms: Inner BOM records in display order.
        connector_boms: Connector (module) BOM records in display order.
    """

    model_config = ConfigDict(extra="forbid")

    outer_boms: list[BomRecordConfig] = Field(default_factory=list)
    inner_boms: list[BomRecordConfig] = Field(default_factory=list)
    connector_boms: list[BomRecordConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_lists(self) -> "CatalogConfig":
        """Validate id uniqueness and type consistency per list."""
        _check_list(self.outer_boms, BomTypeConfig.OUTER, "outer_boms")
        _check_list(self.inner_boms, BomTypeConfig.INNER, "inner_boms")
        _check_list(self.connector_boms, BomTypeConfig.CONNECTOR, "connector_boms")
        return self
