"""Elevation code synthesis.

An elevation code is the attribute set joined by ``-`` in a fixed order::

    series-window_type-no_of_leaves-hinge_direction-open_direction-sill-
    glass_groove-insect_screen-interlocking_stile-big_opening

with ``big_opening`` rendered as ``Yes`` or ``No``. For example
``IWS-SD-2-R-IN-Step-18-IS-A-Yes``.

No escaping is performed. Codes built from the closed option sets can be
parsed back with ``parse_code``; codes built from arbitrary strings that
contain the delimiter cannot.
"""

from __future__ import annotations

from ..value_objects import (
    CODE_DELIMITER,
    GLASS_GROOVES,
    LEAF_COUNTS,
    OPTIONS,
    REQUIRED_FIELDS,
    ElevationAttributes,
)

CODE_SEGMENTS = 10

_BIG_OPENING = {True: "Yes", False: "No"}


def missing_fields(attrs: ElevationAttributes) -> list[str]:
    """Return the required fields that are still unset, in code order.

    A field is unset when it is None or a blank string. The option value
    ``"None"`` counts as set.
    """
    return [name for name in REQUIRED_FIELDS if not _is_set(getattr(attrs, name))]


def _is_set(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


def generate_code(attrs: ElevationAttributes) -> str:
    """Generate the elevation code for an attribute set.

    Args:
        attrs: A possibly partial attribute set.

    Returns:
        The dash-joined code, or an empty string while any required field
        is unset.
    """
    if missing_fields(attrs):
        return ""

    segments = [
        attrs.series,
        attrs.window_type,
        str(attrs.no_of_leaves),
        attrs.hinge_direction,
        attrs.open_direction,
        attrs.sill,
        str(attrs.glass_groove),
        attrs.insect_screen,
        attrs.interlocking_stile,
        _BIG_OPENING[bool(attrs.big_opening)],
    ]
    return CODE_DELIMITER.join(segments)


def parse_code(code: str) -> ElevationAttributes | None:
    """Recover the attribute set from a code built from the option sets.

    Returns:
        The attribute set, or None if the code does not have exactly ten
        segments or any segment falls outside its option set.
    """
    segments = code.split(CODE_DELIMITER)
    if len(segments) != CODE_SEGMENTS:
        return None

    (
        series,
        window_type,
        leaves,
        hinge,
        opening,
        sill,
        groove,
        screen,
        stile,
        big_opening,
    ) = segments

    if not (leaves.isdigit() and int(leaves) in LEAF_COUNTS):
        return None
    if not (groove.isdigit() and int(groove) in GLASS_GROOVES):
        return None
    if big_opening not in ("Yes", "No"):
        return None

    candidate = {
        "series": series,
        "window_type": window_type,
        "hinge_direction": hinge,
        "open_direction": opening,
        "sill": sill,
        "insect_screen": screen,
        "interlocking_stile": stile,
    }
    for name, value in candidate.items():
        if value not in OPTIONS[name]:
            return None

    return ElevationAttributes(
        no_of_leaves=int(leaves),
        glass_groove=int(groove),
        big_opening=big_opening == "Yes",
        **candidate,
    )
