"""
Tests for widget option resolution.
"""

import math

import pytest

from calendar_heatmap.options import (
    DEFAULT_LEGEND_LABELS,
    ResolvedConfig,
    is_finite_number,
    resolve_cell_size,
    resolve_config,
    resolve_labels_list,
)


class TestIsFiniteNumber:
    """Tests for is_finite_number."""

    def test_numbers(self):
        assert is_finite_number(1)
        assert is_finite_number(0.5)

    def test_not_numbers(self):
        assert not is_finite_number(True)
        assert not is_finite_number("4")
        assert not is_finite_number(math.nan)
        assert not is_finite_number(math.inf)
        assert not is_finite_number(None)


class TestResolveCellSize:
    """Tests for resolve_cell_size."""

    def test_number_is_square(self):
        assert resolve_cell_size(30) == (30, 30)

    def test_width_only_is_square(self):
        assert resolve_cell_size({"width": 52}) == (52, 52)

    def test_height_only_is_square(self):
        assert resolve_cell_size({"height": 40}) == (40, 40)

    def test_both_is_rectangle(self):
        assert resolve_cell_size({"width": 52, "height": 40}) == (52, 40)

    @pytest.mark.parametrize("size", [None, {}, "big", 0, -5, math.nan, {"width": "52"}, True])
    def test_falls_back_to_default(self, size):
        assert resolve_cell_size(size) == (44, 44)


class TestResolveLabelsList:
    """Tests for resolve_labels_list."""

    def test_non_strings_take_default_at_same_position(self):
        assert resolve_labels_list(["A", 3, "B"]) == ("A", "Medium", "B")
        assert resolve_labels_list(["A", None, "C"]) == ("A", "Medium", "C")

    def test_defaults_for_empty_or_malformed(self):
        assert resolve_labels_list([]) == DEFAULT_LEGEND_LABELS
        assert resolve_labels_list("Low") == DEFAULT_LEGEND_LABELS
        assert resolve_labels_list([1, 2]) == ("Low", "Medium")


class TestResolveConfig:
    """Tests for resolve_config."""

    def test_documented_defaults(self):
        config = resolve_config()

        assert config.cell_width == 44
        assert config.cell_height == 44
        assert config.gap == 4
        assert config.base_color == "#3b82f6"
        assert config.empty_color == "#FFECEC"
        assert config.cell_text_color == "#172343"
        assert config.show_date is True
        assert config.show_value is True
        assert config.value_unit == ""
        assert config.show_month is True
        assert config.show_weekday is True
        assert config.weekday_language == "en"
        assert config.weekday_margin_top == 6
        assert config.week_start == "sun"
        assert config.show_legend is True
        assert config.legend_position == "bottom"
        assert config.legend_labels == ("Low", "Medium", "High", "Very High")
        assert config.legend_margin == 12
        assert config.container_width == "auto"
        assert config.container_style == {"display": "inline-flex", "flexDirection": "column"}
        assert config.text_color == "#ffffff"

    def test_defaults_match_dataclass_defaults(self):
        assert resolve_config({}) == ResolvedConfig()

    def test_none_groups_are_ignored(self):
        config = resolve_config({"cell": None, "legend": None, "range": None})

        assert config == ResolvedConfig()

    def test_caller_values_override_defaults(self):
        config = resolve_config({
            "range": {"weekStart": "mon"},
            "cell": {
                "size": {"width": 52, "height": 40},
                "gap": 2,
                "baseColor": "#fdbab0",
                "emptyColor": "#eee",
                "showDate": False,
                "valueUnit": "kg",
            },
            "labels": {"weekdayLanguage": "ko", "showWeekday": False, "weekdayMarginTop": 10},
            "legend": {"position": "top", "labels": ["A"], "margin": 0},
            "container": {"width": 400, "style": {"padding": 24}},
            "typography": {"textColor": "#000"},
        })

        assert config.week_start == "mon"
        assert (config.cell_width, config.cell_height) == (52, 40)
        assert config.gap == 2
        assert config.base_color == "#fdbab0"
        assert config.empty_color == "#eee"
        assert config.show_date is False
        assert config.value_unit == "kg"
        assert config.weekday_language == "ko"
        assert config.show_weekday is False
        assert config.weekday_margin_top == 10
        assert config.legend_position == "top"
        assert config.legend_labels == ("A",)
        assert config.legend_margin == 0
        assert config.container_width == 400
        assert config.container_style == {
            "display": "inline-flex",
            "flexDirection": "column",
            "padding": 24,
        }
        assert config.text_color == "#000"

    def test_container_style_can_override_base(self):
        config = resolve_config({"container": {"style": {"display": "flex"}}})

        assert config.container_style["display"] == "flex"

    def test_malformed_values_fall_back(self):
        config = resolve_config({
            "range": {"weekStart": "tue"},
            "cell": {
                "gap": -1,
                "baseColor": "not-a-color",
                "showValue": "yes",
                "valueUnit": 5,
                "emptyColor": "",
            },
            "labels": {"weekdayLanguage": "fr", "showMonth": 1},
            "legend": {"position": "left", "show": "no", "margin": math.nan},
            "container": {"width": -10, "style": "padding: 4px"},
            "typography": {"textColor": 12},
        })

        assert config == ResolvedConfig()

    def test_non_mapping_groups_fall_back(self):
        config = resolve_config({"cell": "big", "legend": ["A"], "labels": 3})

        assert config == ResolvedConfig()

    def test_non_mapping_options(self):
        assert resolve_config("nonsense") == ResolvedConfig()

    def test_three_digit_base_color_is_accepted(self):
        assert resolve_config({"cell": {"baseColor": "#abc"}}).base_color == "#abc"
