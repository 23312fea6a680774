"""Elevation editor session.

Holds the state of one "add new elevation" form. Each change replaces the
attribute snapshot with a new immutable value; the generated code and BOM
candidates are derived from the current snapshot whenever ``view`` is read,
so they always reflect the most recent change.
"""

from __future__ import annotations

from typing import Any

from elevations.application.dtos import EditorView
from elevations.domain.entities import BomCatalog, BomRecord
from elevations.domain.services import (
    candidate_boms,
    generate_code,
    match_inner_boms,
    match_outer_boms,
    validate_draft,
)
from elevations.domain.value_objects import BomType, ElevationAttributes


class ElevationEditor:
    """State of one elevation being configured.

    Example:
        editor = ElevationEditor(load_default_catalog())
        editor.update(series="IWS", window_type="SD", open_direction="L")
        editor.select_bom(BomType.OUTER, 1)
        print(editor.view().code)
    """

    def __init__(
        self,
        catalog: BomCatalog,
        attributes: ElevationAttributes | None = None,
        name: str = "",
        auto_match: bool = True,
        search_term: str = "",
    ) -> None:
        self.catalog = catalog
        self.attributes = attributes or ElevationAttributes()
        self.name = name
        self.auto_match = auto_match
        self.search_term = search_term
        self._selected: dict[BomType, BomRecord | None] = {
            BomType.OUTER: None,
            BomType.INNER: None,
        }

    def update(self, **changes: Any) -> ElevationAttributes:
        """Replace the snapshot with one carrying ``changes``."""
        self.attributes = self.attributes.with_changes(**changes)
        return self.attributes

    def rename(self, name: str) -> None:
        self.name = name

    def set_auto_match(self, enabled: bool) -> None:
        self.auto_match = enabled

    def set_search_term(self, term: str) -> None:
        self.search_term = term

    def select_bom(self, bom_type: BomType, bom_id: int | None) -> BomRecord | None:
        """Select a BOM by id, or clear the selection with None.

        Raises:
            KeyError: If the catalog has no BOM of that type with ``bom_id``.
        """
        bom_type = BomType(bom_type)
        if bom_id is None:
            self._selected[bom_type] = None
            return None
        bom = self.catalog.find(bom_type, bom_id)
        if bom is None:
            raise KeyError(f"No {bom_type.value} BOM with id {bom_id}")
        self._selected[bom_type] = bom
        return bom

    @property
    def selected_outer(self) -> BomRecord | None:
        return self._selected[BomType.OUTER]

    @property
    def selected_inner(self) -> BomRecord | None:
        return self._selected[BomType.INNER]

    def view(self) -> EditorView:
        """Derive code, matches, candidates and save readiness."""
        attrs = self.attributes
        return EditorView(
            attributes=attrs,
            name=self.name,
            code=generate_code(attrs),
            auto_match=self.auto_match,
            search_term=self.search_term,
            matched_outer=match_outer_boms(attrs, self.catalog.outer),
            matched_inner=match_inner_boms(attrs, self.catalog.inner),
            outer_candidates=candidate_boms(
                self.catalog.outer, attrs, BomType.OUTER, self.auto_match, self.search_term
            ),
            inner_candidates=candidate_boms(
                self.catalog.inner, attrs, BomType.INNER, self.auto_match, self.search_term
            ),
            selected_outer=self.selected_outer,
            selected_inner=self.selected_inner,
            validation=validate_draft(
                attrs, self.name, self.selected_outer, self.selected_inner
            ),
        )
