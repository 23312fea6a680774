"""Automatic BOM matching and manual BOM search.

Auto-match keeps the catalog records whose series, window system and
handing equal the elevation's series, window type and open direction.
Matching is exact and case-sensitive. When any of the three drivers is
unset the match set is empty rather than the whole catalog.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..entities import BomRecord
from ..value_objects import BomType, ElevationAttributes


def match_boms(
    catalog: Iterable[BomRecord],
    series: str,
    window_system: str,
    open_direction: str,
) -> list[BomRecord]:
    """Filter a catalog to the records matching all three drivers.

    Args:
        catalog: Records in display order.
        series: Series code to match against ``series_code``.
        window_system: Window system code to match against ``window_system``.
        open_direction: Handing to match against ``open_direction``.

    Returns:
        Matching records in catalog order. Empty if any driver is empty.
    """
    if not (series and window_system and open_direction):
        return []
    return [
        bom
        for bom in catalog
        if bom.series_code == series
        and bom.window_system == window_system
        and bom.open_direction == open_direction
    ]


def _of_type(catalog: Iterable[BomRecord], bom_type: BomType) -> list[BomRecord]:
    return [bom for bom in catalog if bom.bom_type == bom_type]


def match_outer_boms(
    attrs: ElevationAttributes, catalog: Iterable[BomRecord]
) -> list[BomRecord]:
    """Outer BOMs matching an attribute set."""
    return match_boms(
        _of_type(catalog, BomType.OUTER),
        attrs.series,
        attrs.window_type,
        attrs.open_direction,
    )


def match_inner_boms(
    attrs: ElevationAttributes, catalog: Iterable[BomRecord]
) -> list[BomRecord]:
    """Inner BOMs matching an attribute set."""
    return match_boms(
        _of_type(catalog, BomType.INNER),
        attrs.series,
        attrs.window_type,
        attrs.open_direction,
    )


def search_boms(records: Sequence[BomRecord], term: str) -> list[BomRecord]:
    """Keep records whose BOM code or handle type contains ``term``.

    Comparison is case-insensitive. An empty term keeps everything.
    """
    needle = term.lower()
    if not needle:
        return list(records)
    return [
        bom
        for bom in records
        if needle in bom.bom_code.lower() or needle in bom.handle_type.lower()
    ]


def candidate_boms(
    catalog: Iterable[BomRecord],
    attrs: ElevationAttributes,
    bom_type: BomType,
    auto_match: bool = True,
    search_term: str = "",
) -> list[BomRecord]:
    """Records offered for selection in one half of the BOM picker.

    With auto-match on, the match set for ``attrs``; otherwise the full
    catalog of ``bom_type``. The search term then narrows either list.
    """
    typed = _of_type(catalog, bom_type)
    if auto_match:
        base = match_boms(typed, attrs.series, attrs.window_type, attrs.open_direction)
    else:
        base = typed
    return search_boms(base, search_term)
