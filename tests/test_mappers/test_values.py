"""Tests for shared value helpers."""

import pytest

from brickify.mappers.values import (
    alpha_hex_twins,
    class_selector,
    expand_box,
    is_color,
    parse_value,
    resolve_variables,
    split_css_value,
    to_hex,
)


class TestParseValue:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("32px", 32),
            ("1.5px", 1.5),
            ("-4px", -4),
            ("2rem", "2rem"),
            ("50%", "50%"),
            ("0", "0"),
            ("auto", "auto"),
            ("calc(100% - 10px)", "calc(100% - 10px)"),
            ("var(--gap)", "var(--gap)"),
        ],
    )
    def test_values(self, raw, expected):
        assert parse_value(raw) == expected

    def test_non_string_passes_through(self):
        assert parse_value(12) == 12

    def test_split_keeps_functions_whole(self):
        assert split_css_value("0 4px rgba(0, 0, 0, 0.1)") == ["0", "4px", "rgba(0, 0, 0, 0.1)"]
        assert split_css_value("") == []


class TestVariables:
    def test_simple(self):
        assert resolve_variables("var(--brand)", {"--brand": "red"}) == "red"

    def test_chained(self):
        variables = {"--a": "var(--b)", "--b": "blue"}
        assert resolve_variables("1px solid var(--a)", variables) == "1px solid blue"

    def test_fallback(self):
        assert resolve_variables("var(--missing, 10px)", {}) == "10px"

    def test_fallback_with_function(self):
        assert resolve_variables("var(--missing, rgb(0, 0, 0))", {}) == "rgb(0, 0, 0)"

    def test_unknown_left_in_place(self):
        assert resolve_variables("var(--missing)", {"--other": "x"}) == "var(--missing)"

    def test_circular_terminates(self):
        variables = {"--a": "var(--b)", "--b": "var(--a)"}
        assert resolve_variables("var(--a)", variables).startswith("var(")

    def test_no_variables(self):
        assert resolve_variables("red", None) == "red"


class TestColors:
    def test_named_to_hex(self):
        assert to_hex("red") == "#ff0000"
        assert to_hex("White") == "#ffffff"

    def test_hex_and_rgb_pass_through(self):
        assert to_hex("#fff") == "#fff"
        assert to_hex("#1a2b3c") == "#1a2b3c"
        assert to_hex("rgb(1, 2, 3)") == "rgb(1, 2, 3)"

    def test_unconvertible(self):
        assert to_hex("#ff000080") is None
        assert to_hex("papayawhip") is None
        assert to_hex("") is None

    @pytest.mark.parametrize("token", ["#abc", "#ff000080", "transparent", "rgba(0,0,0,.5)", "hsl(0, 0%, 0%)", "red"])
    def test_is_color(self, token):
        assert is_color(token)

    @pytest.mark.parametrize("token", ["solid", "10px", "#zzz", "center"])
    def test_is_not_color(self, token):
        assert not is_color(token)

    def test_alpha_twins(self):
        assert alpha_hex_twins("#ff000080") == ("rgba(255, 0, 0, 0.502)", "hsla(0, 0%, 33%, 0.502)")

    def test_alpha_twins_short_form(self):
        assert alpha_hex_twins("#f008") == alpha_hex_twins("#ff000088")

    def test_alpha_twins_rejects_opaque(self):
        assert alpha_hex_twins("#ff0000") is None


class TestBox:
    def test_one_value(self):
        assert expand_box("10px") == {"top": 10, "right": 10, "bottom": 10, "left": 10}

    def test_two_values(self):
        assert expand_box("0 auto") == {"top": "0", "right": "auto", "bottom": "0", "left": "auto"}

    def test_three_values(self):
        assert expand_box("1px 2px 3px") == {"top": 1, "right": 2, "bottom": 3, "left": 2}

    def test_four_values(self):
        assert expand_box("1px 2px 3px 4px") == {"top": 1, "right": 2, "bottom": 3, "left": 4}

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            expand_box("  ")


def test_class_selector_escapes_dots():
    assert class_selector("card") == ".card"
    assert class_selector("w-1.5") == ".w-1\\.5"
