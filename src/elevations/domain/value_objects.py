"""Value objects for the elevation domain."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any


class Series(str, Enum):
    """Product lines that group compatible BOMs and elevations."""

    IWS = "IWS"
    IWE = "IWE"
    IWN = "IWN"
    IWP = "IWP"


class WindowType(str, Enum):
    """Window system codes.

    Attributes:
        SD: Sliding door.
        DO: Double opening.
        CS: Casement.
        TH: Tilt and turn.
        FX: Fixed.
        LO: Louver.
        AW: Awning.
        HO: Hopper.
        PJ: Projected.
    """

    SD = "SD"
    DO = "DO"
    CS = "CS"
    TH = "TH"
    FX = "FX"
    LO = "LO"
    AW = "AW"
    HO = "HO"
    PJ = "PJ"


class HingeDirection(str, Enum):
    """Side the leaves are hinged on."""

    RIGHT = "R"
    LEFT = "L"
    NONE = "None"
    BOTH = "Both"


class OpenDirection(str, Enum):
    """Direction the leaves swing relative to the building."""

    IN = "IN"
    OUT = "Out"
    NONE = "None"


class Sill(str, Enum):
    """Sill profile types."""

    STEP = "Step"
    FLAT = "Flat"
    NONE = "None"
    REGULAR = "Regular"
    LOW = "Low"


class InsectScreen(str, Enum):
    """Whether an insect screen is fitted."""

    FITTED = "IS"
    NO = "No"


class InterlockingStile(str, Enum):
    """Interlocking stile profile letters."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    S = "S"
    NONE = "None"


class BomType(str, Enum):
    """Which half of an elevation a BOM covers."""

    OUTER = "outer"
    INNER = "inner"
    CONNECTOR = "connector"


class BomOpenDirection(str, Enum):
    """Handing of a BOM record."""

    LEFT = "L"
    RIGHT = "R"
    BOTH = "LR"


class RecordStatus(str, Enum):
    """Lifecycle status shown on catalog records."""

    ACTIVE = "Active"
    DRAFT = "Draft"
    ARCHIVED = "Archived"


LEAF_COUNTS: tuple[int, ...] = (1, 2, 3, 4, 6, 8)
GLASS_GROOVES: tuple[int, ...] = (18, 24, 28, 32)

DEFAULT_LEAF_COUNT = 1
DEFAULT_GLASS_GROOVE = 18

CODE_DELIMITER = "-"

# Fields that must be set before a code exists, in code order.
REQUIRED_FIELDS: tuple[str, ...] = (
    "series",
    "window_type",
    "hinge_direction",
    "open_direction",
    "sill",
    "insect_screen",
    "interlocking_stile",
)

# Closed option sets, keyed by attribute name. Shared by the CLI, the web
# options endpoint and the code parser.
OPTIONS: dict[str, tuple[Any, ...]] = {
    "series": tuple(m.value for m in Series),
    "window_type": tuple(m.value for m in WindowType),
    "no_of_leaves": LEAF_COUNTS,
    "hinge_direction": tuple(m.value for m in HingeDirection),
    "open_direction": tuple(m.value for m in OpenDirection),
    "sill": tuple(m.value for m in Sill),
    "glass_groove": GLASS_GROOVES,
    "insect_screen": tuple(m.value for m in InsectScreen),
    "interlocking_stile": tuple(m.value for m in InterlockingStile),
    "big_opening": (True, False),
}


@dataclass(frozen=True)
class ElevationAttributes:
    """The configuration a user is building.

    String fields use ``""`` for "not chosen yet". Enum members may be
    passed in place of strings; they are stored as their plain values so
    that equality and code generation only ever see strings.

    Attributes:
        series: Product line code (see ``Series``).
        window_type: Window system code (see ``WindowType``).
        no_of_leaves: Number of leaves, one of ``LEAF_COUNTS``.
        hinge_direction: Hinge side (see ``HingeDirection``).
        open_direction: Swing direction (see ``OpenDirection``).
        sill: Sill profile (see ``Sill``).
        glass_groove: Glass groove width in mm, one of ``GLASS_GROOVES``.
        insect_screen: Insect screen option (see ``InsectScreen``).
        interlocking_stile: Stile profile (see ``InterlockingStile``).
        big_opening: Whether the big-opening variant is used.
    """

    series: str = ""
    window_type: str = ""
    no_of_leaves: int = DEFAULT_LEAF_COUNT
    hinge_direction: str = ""
    open_direction: str = ""
    sill: str = ""
    glass_groove: int = DEFAULT_GLASS_GROOVE
    insect_screen: str = ""
    interlocking_stile: str = ""
    big_opening: bool = False

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Enum):
                object.__setattr__(self, f.name, value.value)

    def with_changes(self, **changes: Any) -> ElevationAttributes:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Plain dictionary of all fields, in code order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
