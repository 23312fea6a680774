"""Base enums and shared constants for elevation configuration schemas.

The enums are the domain enums, aliased here so schema modules and callers
can import everything configuration-related from one place.
"""

from elevations.domain.value_objects import (
    BomOpenDirection,
    BomType,
    HingeDirection,
    InsectScreen,
    InterlockingStile,
    OpenDirection,
    RecordStatus,
    Series,
    Sill,
    WindowType,
)

# Supported schema versions for configuration files
# Version 1.0: Elevation attributes, BOM selection and optional catalog
# Version 1.1: Added catalog metadata (bom_name, total_parts, status) and
#              elevation listing records
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})

SeriesConfig = Series
WindowTypeConfig = WindowType
HingeDirectionConfig = HingeDirection
OpenDirectionConfig = OpenDirection
SillConfig = Sill
InsectScreenConfig = InsectScreen
InterlockingStileConfig = InterlockingStile
BomTypeConfig = BomType
BomOpenDirectionConfig = BomOpenDirection
RecordStatusConfig = RecordStatus
