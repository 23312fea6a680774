"""Tests for elevation code generation and parsing."""

import pytest

from elevations.domain.services import generate_code, missing_fields, parse_code
from elevations.domain.value_objects import (
    REQUIRED_FIELDS,
    ElevationAttributes,
    OpenDirection,
    Series,
)


class TestGenerateCode:
    """Tests for generate_code."""

    def test_complete_attributes_produce_code(
        self, complete_attrs: ElevationAttributes
    ) -> None:
        assert generate_code(complete_attrs) == "IWS-SD-2-R-IN-Step-18-IS-A-Yes"

    def test_missing_open_direction_produces_empty_code(
        self, complete_attrs: ElevationAttributes
    ) -> None:
        attrs = complete_attrs.with_changes(open_direction="")
        assert generate_code(attrs) == ""

    @pytest.mark.parametrize("field_name", REQUIRED_FIELDS)
    def test_any_missing_required_field_produces_empty_code(
        self, complete_attrs: ElevationAttributes, field_name: str
    ) -> None:
        attrs = complete_attrs.with_changes(**{field_name: ""})
        assert generate_code(attrs) == ""

    def test_whitespace_only_field_counts_as_missing(
        self, complete_attrs: ElevationAttributes
    ) -> None:
        attrs = complete_attrs.with_changes(sill="   ")
        assert generate_code(attrs) == ""

    def test_none_field_counts_as_missing(
        self, complete_attrs: ElevationAttributes
    ) -> None:
        attrs = complete_attrs.with_changes(hinge_direction=None)

        assert missing_fields(attrs) == ["hinge_direction"]
        assert generate_code(attrs) == ""

    def test_none_option_value_counts_as_set(
        self, complete_attrs: ElevationAttributes
    ) -> None:
        attrs = complete_attrs.with_changes(hinge_direction="None", sill="None")

        assert missing_fields(attrs) == []
        assert generate_code(attrs) == "IWS-SD-2-None-IN-None-18-IS-A-Yes"

    def test_code_has_ten_segments_in_field_order(
        self, complete_attrs: ElevationAttributes
    ) -> None:
        segments = generate_code(complete_attrs).split("-")
        assert segments == [
            "IWS", "SD", "2", "R", "IN", "Step", "18", "IS", "A", "Yes",
        ]

    def test_big_opening_false_renders_no(
        self, complete_attrs: ElevationAttributes
    ) -> None:
        attrs = complete_attrs.with_changes(big_opening=False)
        assert generate_code(attrs).endswith("-No")

    def test_defaults_fill_leaves_and_groove(self) -> None:
        attrs = ElevationAttributes(
            series="IWE",
            window_type="CS",
            hinge_direction="L",
            open_direction="Out",
            sill="Flat",
            insect_screen="No",
            interlocking_stile="B",
        )
        assert generate_code(attrs) == "IWE-CS-1-L-Out-Flat-18-No-B-No"

    def test_enum_members_are_accepted(
        self, complete_attrs: ElevationAttributes
    ) -> None:
        attrs = complete_attrs.with_changes(
            series=Series.IWE, open_direction=OpenDirection.OUT
        )
        assert generate_code(attrs) == "IWE-SD-2-R-Out-Step-18-IS-A-Yes"

    def test_generation_is_pure(self, complete_attrs: ElevationAttributes) -> None:
        assert generate_code(complete_attrs) == generate_code(complete_attrs)

    def test_values_are_not_normalized(
        self, complete_attrs: ElevationAttributes
    ) -> None:
        attrs = complete_attrs.with_changes(series="iws")
        assert generate_code(attrs).startswith("iws-")


class TestMissingFields:
    """Tests for missing_fields."""

    def test_empty_attributes_miss_all_required_fields(self) -> None:
        assert missing_fields(ElevationAttributes()) == list(REQUIRED_FIELDS)

    def test_complete_attributes_miss_nothing(
        self, complete_attrs: ElevationAttributes
    ) -> None:
        assert missing_fields(complete_attrs) == []

    def test_reports_in_code_order(self) -> None:
        attrs = ElevationAttributes(series="IWS", sill="Step")
        assert missing_fields(attrs) == [
            "window_type",
            "hinge_direction",
            "open_direction",
            "insect_screen",
            "interlocking_stile",
        ]


class TestParseCode:
    """Tests for parse_code."""

    def test_parses_generated_code(self, complete_attrs: ElevationAttributes) -> None:
        assert parse_code("IWS-SD-2-R-IN-Step-18-IS-A-Yes") == complete_attrs

    def test_parses_none_values(self) -> None:
        attrs = parse_code("IWS-FX-4-None-None-Regular-18-No-C-No")

        assert attrs is not None
        assert attrs.hinge_direction == "None"
        assert attrs.open_direction == "None"
        assert attrs.no_of_leaves == 4
        assert attrs.big_opening is False

    @pytest.mark.parametrize(
        "code",
        [
            "",
            "IWS-SD-2-R-IN-Step-18-IS-A",
            "IWS-SD-2-R-IN-Step-18-IS-A-Yes-Extra",
            "XXX-SD-2-R-IN-Step-18-IS-A-Yes",
            "IWS-SD-5-R-IN-Step-18-IS-A-Yes",
            "IWS-SD-2-R-IN-Step-20-IS-A-Yes",
            "IWS-SD-2-R-IN-Step-18-IS-A-Maybe",
            "IWS-SD-two-R-IN-Step-18-IS-A-Yes",
        ],
    )
    def test_rejects_malformed_codes(self, code: str) -> None:
        assert parse_code(code) is None
