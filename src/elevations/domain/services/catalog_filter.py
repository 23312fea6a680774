"""Search, filtering and summary counts for the BOM and elevation catalogs."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from ..entities import BomRecord, ElevationRecord
from ..value_objects import BomType, InsectScreen, RecordStatus

ALL = "all"

T = TypeVar("T")


def _contains(term: str, *values: str | None) -> bool:
    return any(term in value.lower() for value in values if value)


def filter_bom_catalog(
    records: Sequence[BomRecord],
    search_term: str = "",
    bom_type: BomType | str = ALL,
    series: str = ALL,
) -> list[BomRecord]:
    """Filter the BOM structure listing.

    Args:
        records: Catalog records in display order.
        search_term: Case-insensitive substring matched against the BOM code,
            name, series code and window system.
        bom_type: A ``BomType`` (or its value), or "all".
        series: A series code, or "all".

    Returns:
        Records satisfying every filter, in catalog order.
    """
    term = search_term.lower()
    wanted_type = None if bom_type == ALL else BomType(bom_type)
    return [
        bom
        for bom in records
        if _contains(term, bom.bom_code, bom.bom_name, bom.series_code, bom.window_system)
        and (wanted_type is None or bom.bom_type == wanted_type)
        and (series == ALL or bom.series_code == series)
    ]


def filter_elevations(
    records: Sequence[ElevationRecord],
    search_term: str = "",
    series: str = ALL,
    window_type: str = ALL,
) -> list[ElevationRecord]:
    """Filter the elevation listing.

    The search term is matched case-insensitively against the code, name,
    series and window type.
    """
    term = search_term.lower()
    return [
        elevation
        for elevation in records
        if _contains(
            term,
            elevation.code,
            elevation.name,
            elevation.attributes.series,
            elevation.attributes.window_type,
        )
        and (series == ALL or elevation.attributes.series == series)
        and (window_type == ALL or elevation.attributes.window_type == window_type)
    ]


def unique_values(records: Iterable[T], attr: str) -> list[Any]:
    """Distinct values of a dotted attribute path, in first-seen order.

    Example:
        >>> unique_values(elevations, "attributes.series")
        ['IWS', 'IWE']
    """
    seen: dict[Any, None] = {}
    for record in records:
        value: Any = record
        for part in attr.split("."):
            value = getattr(value, part)
        seen.setdefault(value, None)
    return list(seen)


def bom_statistics(records: Sequence[BomRecord]) -> dict[str, Any]:
    """Summary counts shown above the BOM structure listing."""
    by_type = Counter(bom.bom_type.value for bom in records)
    return {
        "total": len(records),
        "active": sum(1 for bom in records if bom.status is RecordStatus.ACTIVE),
        "by_type": {t.value: by_type.get(t.value, 0) for t in BomType},
        "series": unique_values(records, "series_code"),
    }


def elevation_statistics(records: Sequence[ElevationRecord]) -> dict[str, Any]:
    """Summary counts shown above the elevation listing."""
    by_series = Counter(e.attributes.series for e in records)
    return {
        "total": len(records),
        "by_series": dict(by_series),
        "with_insect_screen": sum(
            1 for e in records if e.attributes.insect_screen == InsectScreen.FITTED.value
        ),
    }
