"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from elevations.domain.entities import BomRecord, ElevationDraft
from elevations.domain.services import DraftValidation
from elevations.domain.value_objects import ElevationAttributes


@dataclass(frozen=True)
class EditorView:
    """Everything the elevation form displays, derived from one snapshot.

    Attributes:
        attributes: The attribute snapshot the view was derived from.
        name: Display name entered so far.
        code: Generated elevation code, empty until complete.
        auto_match: Whether candidates are restricted to matches.
        search_term: Manual BOM search text.
        matched_outer: Outer BOMs matching the attributes.
        matched_inner: Inner BOMs matching the attributes.
        outer_candidates: Outer BOMs offered for selection.
        inner_candidates: Inner BOMs offered for selection.
        selected_outer: Selected outer BOM, if any.
        selected_inner: Selected inner BOM, if any.
        validation: Save readiness of the current snapshot.
    """

    attributes: ElevationAttributes
    name: str
    code: str
    auto_match: bool
    search_term: str
    matched_outer: list[BomRecord] = field(default_factory=list)
    matched_inner: list[BomRecord] = field(default_factory=list)
    outer_candidates: list[BomRecord] = field(default_factory=list)
    inner_candidates: list[BomRecord] = field(default_factory=list)
    selected_outer: BomRecord | None = None
    selected_inner: BomRecord | None = None
    validation: DraftValidation | None = None

    @property
    def bom_selection_complete(self) -> bool:
        """One elevation needs one outer and one inner BOM."""
        return self.selected_outer is not None and self.selected_inner is not None

    @property
    def can_save(self) -> bool:
        return self.validation is not None and self.validation.is_valid


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a save attempt.

    ``draft`` is set only when ``validation`` passed.
    """

    validation: DraftValidation
    draft: ElevationDraft | None = None

    @property
    def saved(self) -> bool:
        return self.draft is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "saved": self.saved,
            "reason": self.validation.reason.value,
            "message": self.validation.message,
            "missing_fields": list(self.validation.missing_fields),
            "missing_selections": list(self.validation.missing_selections),
            "draft": self.draft.to_dict() if self.draft else None,
        }
