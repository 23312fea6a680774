"""Tests for the elevation editor session."""

import pytest

from elevations.application import ElevationEditor
from elevations.domain.entities import BomCatalog
from elevations.domain.services import ReasonCode
from elevations.domain.value_objects import BomType, ElevationAttributes


@pytest.fixture
def editor(catalog: BomCatalog) -> ElevationEditor:
    return ElevationEditor(catalog)


class TestElevationEditor:
    """Tests for ElevationEditor."""

    def test_initial_view(self, editor: ElevationEditor) -> None:
        view = editor.view()

        assert view.code == ""
        assert view.matched_outer == []
        assert view.matched_inner == []
        assert view.outer_candidates == []
        assert not view.bom_selection_complete
        assert not view.can_save
        assert view.validation.reason is ReasonCode.INCOMPLETE_ATTRIBUTES

    def test_update_replaces_snapshot(self, editor: ElevationEditor) -> None:
        before = editor.attributes
        after = editor.update(series="IWS")

        assert before.series == ""
        assert after.series == "IWS"
        assert editor.attributes is after

    def test_code_follows_latest_change(
        self, catalog: BomCatalog, complete_attrs: ElevationAttributes
    ) -> None:
        editor = ElevationEditor(catalog, attributes=complete_attrs)
        assert editor.view().code == "IWS-SD-2-R-IN-Step-18-IS-A-Yes"

        editor.update(no_of_leaves=4)
        assert editor.view().code == "IWS-SD-4-R-IN-Step-18-IS-A-Yes"

        editor.update(open_direction="")
        assert editor.view().code == ""

    def test_candidates_follow_drivers(self, editor: ElevationEditor) -> None:
        editor.update(series="IWE", window_type="CS", open_direction="R")
        view = editor.view()

        assert [bom.bom_code for bom in view.matched_outer] == ["U4E-41004"]
        assert [bom.bom_code for bom in view.inner_candidates] == ["U4I-51004"]

        editor.update(open_direction="L")
        assert [bom.bom_code for bom in editor.view().matched_outer] == ["U4E-41003"]

    def test_auto_match_off_offers_whole_catalog(
        self, editor: ElevationEditor, catalog: BomCatalog
    ) -> None:
        editor.set_auto_match(False)
        view = editor.view()

        assert view.outer_candidates == list(catalog.outer)
        assert view.inner_candidates == list(catalog.inner)

    def test_search_term_narrows_candidates(self, editor: ElevationEditor) -> None:
        editor.set_auto_match(False)
        editor.set_search_term("5100")

        assert [bom.id for bom in editor.view().inner_candidates] == [1, 2, 3, 4]
        assert editor.view().outer_candidates == []

    def test_select_bom(self, editor: ElevationEditor) -> None:
        bom = editor.select_bom(BomType.OUTER, 2)

        assert bom is not None and bom.bom_code == "U4E-41002"
        assert editor.selected_outer is bom
        assert editor.selected_inner is None

    def test_clear_selection(self, editor: ElevationEditor) -> None:
        editor.select_bom(BomType.INNER, 1)
        editor.select_bom(BomType.INNER, None)
        assert editor.selected_inner is None

    def test_unknown_bom_id_raises(self, editor: ElevationEditor) -> None:
        with pytest.raises(KeyError):
            editor.select_bom(BomType.OUTER, 42)

    def test_view_reports_save_readiness(
        self, catalog: BomCatalog, complete_attrs: ElevationAttributes
    ) -> None:
        editor = ElevationEditor(catalog, attributes=complete_attrs, name="Door")
        editor.select_bom(BomType.OUTER, 1)

        view = editor.view()
        assert not view.can_save
        assert view.validation.missing_selections == ("inner",)

        editor.select_bom(BomType.INNER, 1)
        view = editor.view()
        assert view.bom_selection_complete
        assert view.can_save

    def test_rename(self, editor: ElevationEditor) -> None:
        editor.rename("Patio Door")
        assert editor.view().name == "Patio Door"
