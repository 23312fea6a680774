"""Tests for the text formatters."""

from datetime import date

from elevations.application import ElevationEditor
from elevations.application.data import load_sample_elevations
from elevations.domain.entities import BomCatalog, BomRecord, ElevationDraft
from elevations.domain.services import elevation_statistics
from elevations.domain.value_objects import ElevationAttributes
from elevations.infrastructure import (
    BomTableFormatter,
    DraftFormatter,
    EditorViewFormatter,
    ElevationTableFormatter,
)


class TestBomTableFormatter:
    """Tests for BomTableFormatter."""

    def test_empty(self) -> None:
        assert BomTableFormatter().format([]) == "No BOMs found."

    def test_table(self, catalog: BomCatalog) -> None:
        output = BomTableFormatter().format(list(catalog.inner), "INNER")

        assert output.startswith("INNER")
        assert "U4I-51001" in output
        assert "18mm" in output
        assert "5 BOM(s)" in output


class TestElevationTableFormatter:
    """Tests for ElevationTableFormatter."""

    def test_table(self) -> None:
        records = list(load_sample_elevations())
        output = ElevationTableFormatter().format(records)

        assert "IWE-LO-6-None-IN-Regular-32-IS-F-Yes" in output
        assert "Draft" in output
        assert "2025-01-10" in output
        assert "6 elevation(s)" in output

    def test_empty(self) -> None:
        assert ElevationTableFormatter().format([]) == "No elevations found."

    def test_statistics(self) -> None:
        stats = elevation_statistics(list(load_sample_elevations()))
        output = ElevationTableFormatter().format_statistics(stats)

        assert output == "Total: 6  |  IWS: 3, IWE: 3  |  With insect screen: 3"


class TestEditorViewFormatter:
    """Tests for EditorViewFormatter."""

    def test_incomplete(self, catalog: BomCatalog) -> None:
        output = EditorViewFormatter().format(ElevationEditor(catalog).view())

        assert "Elevation code: (incomplete)" in output
        assert "Auto-match: 0 outer, 0 inner" in output
        assert "No BOMs found." in output

    def test_auto_match_disabled(
        self, catalog: BomCatalog, complete_attrs: ElevationAttributes
    ) -> None:
        editor = ElevationEditor(
            catalog, attributes=complete_attrs, auto_match=False, search_term="41001"
        )
        output = EditorViewFormatter().format(editor.view())

        assert "Elevation code: IWS-SD-2-R-IN-Step-18-IS-A-Yes" in output
        assert "Auto-match: disabled" in output
        assert "Search: '41001'" in output
        assert "U4E-41001" in output


class TestDraftFormatter:
    """Tests for DraftFormatter."""

    def test_format(
        self,
        complete_attrs: ElevationAttributes,
        outer_bom: BomRecord,
        inner_bom: BomRecord,
    ) -> None:
        draft = ElevationDraft(
            id=7,
            name="Door",
            code="IWS-SD-2-R-IN-Step-18-IS-A-Yes",
            attributes=complete_attrs,
            outer_bom=outer_bom,
            inner_bom=inner_bom,
            created=date(2025, 2, 1),
        )
        output = DraftFormatter().format(draft)

        assert 'Elevation "Door" (IWS-SD-2-R-IN-Step-18-IS-A-Yes) created' in output
        assert "ID:        7" in output
        assert "Outer BOM: U4E-41001 (75mm, Single Lock)" in output
