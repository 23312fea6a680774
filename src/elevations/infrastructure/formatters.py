"""Text formatters for BOM lists, elevation listings and the editor view."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from elevations.domain.entities import BomRecord, ElevationDraft, ElevationRecord

if TYPE_CHECKING:
    from elevations.application.dtos import EditorView


class BomTableFormatter:
    """Formats BOM records as a fixed-width table."""

    def format(self, records: Sequence[BomRecord], title: str = "BOMS") -> str:
        if not records:
            return "No BOMs found."

        lines = [
            title,
            "=" * 90,
            f"{'ID':<4} {'BOM Code':<18} {'Series':<8} {'System':<16} "
            f"{'Dir':<4} {'Depth':<6} {'Handle':<16} {'Groove'}",
            "-" * 90,
        ]
        for bom in records:
            groove = f"{bom.glass_groove}mm" if bom.glass_groove else "-"
            lines.append(
                f"{bom.id:<4} {bom.bom_code:<18} {bom.series_code:<8} "
                f"{bom.window_system:<16} {bom.open_direction:<4} "
                f"{bom.frame_depth:<6} {bom.handle_type:<16} {groove}"
            )
        lines.append("-" * 90)
        lines.append(f"{len(records)} BOM(s)")
        return "\n".join(lines)


class ElevationTableFormatter:
    """Formats the elevation listing."""

    def format(self, records: Sequence[ElevationRecord]) -> str:
        if not records:
            return "No elevations found."

        lines = [
            "ELEVATIONS",
            "=" * 96,
            f"{'ID':<4} {'Code':<40} {'Name':<28} {'Status':<9} {'Modified'}",
            "-" * 96,
        ]
        for record in records:
            modified = record.last_modified.isoformat() if record.last_modified else "-"
            lines.append(
                f"{record.id:<4} {record.code:<40} {record.name:<28} "
                f"{record.status.value:<9} {modified}"
            )
        lines.append("-" * 96)
        lines.append(f"{len(records)} elevation(s)")
        return "\n".join(lines)

    def format_statistics(self, stats: dict[str, Any]) -> str:
        series = ", ".join(f"{k}: {v}" for k, v in stats["by_series"].items())
        return (
            f"Total: {stats['total']}  |  {series or 'no series'}  |  "
            f"With insect screen: {stats['with_insect_screen']}"
        )


class EditorViewFormatter:
    """Formats the state of the elevation editor."""

    def __init__(self) -> None:
        self._boms = BomTableFormatter()

    def format(self, view: EditorView) -> str:
        lines = [f"Elevation code: {view.code or '(incomplete)'}"]
        if view.auto_match:
            lines.append(
                f"Auto-match: {len(view.matched_outer)} outer, "
                f"{len(view.matched_inner)} inner"
            )
        else:
            lines.append("Auto-match: disabled")
        if view.search_term:
            lines.append(f"Search: {view.search_term!r}")
        lines.append("")
        lines.append(self._boms.format(view.outer_candidates, "OUTER BOM CANDIDATES"))
        lines.append("")
        lines.append(self._boms.format(view.inner_candidates, "INNER BOM CANDIDATES"))
        return "\n".join(lines)


class DraftFormatter:
    """Formats a saved draft."""

    def format(self, draft: ElevationDraft) -> str:
        attrs = draft.attributes
        return "\n".join(
            [
                f"Elevation \"{draft.name}\" ({draft.code}) created",
                f"  ID:        {draft.id}",
                f"  Status:    {draft.status.value}",
                f"  Leaves:    {attrs.no_of_leaves}",
                f"  Groove:    {attrs.glass_groove}mm",
                f"  Outer BOM: {draft.outer_bom.bom_code} "
                f"({draft.outer_bom.frame_depth}mm, {draft.outer_bom.handle_type})",
                f"  Inner BOM: {draft.inner_bom.bom_code} "
                f"({draft.inner_bom.frame_depth}mm, {draft.inner_bom.handle_type})",
            ]
        )
