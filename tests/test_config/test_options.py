"""Tests for conversion options."""

from dataclasses import FrozenInstanceError

import pytest

from brickify.config import ConvertOptions, SelectorTarget, StyleMode
from brickify.errors import OptionsError


class TestConvertOptions:
    def test_defaults(self):
        options = ConvertOptions()
        assert options.inline_style_handling is StyleMode.CLASS
        assert options.css_selector_target is SelectorTarget.CLASS
        assert options.show_node_class is False
        assert options.merge_non_class_selectors is False
        assert options.include_js is True

    def test_empty_mapping(self):
        assert ConvertOptions.from_mapping(None) == ConvertOptions()
        assert ConvertOptions.from_mapping({}) == ConvertOptions()

    def test_camel_case(self):
        options = ConvertOptions.from_mapping({
            "inlineStyleHandling": "inline",
            "showNodeClass": True,
            "mergeNonClassSelectors": True,
            "cssSelectorTarget": "id",
            "includeJs": False,
        })
        assert options == ConvertOptions(
            inline_style_handling=StyleMode.INLINE,
            show_node_class=True,
            merge_non_class_selectors=True,
            css_selector_target=SelectorTarget.ID,
            include_js=False,
        )

    def test_snake_case_and_enum_values(self):
        options = ConvertOptions.from_mapping({"inline_style_handling": StyleMode.SKIP})
        assert options.inline_style_handling is StyleMode.SKIP

    def test_case_insensitive_enum(self):
        assert ConvertOptions.from_mapping({"cssSelectorTarget": "ID"}).css_selector_target is SelectorTarget.ID

    @pytest.mark.parametrize("raw, expected", [("true", True), ("1", True), ("yes", True), ("false", False), ("no", False), (0, False)])
    def test_bool_coercion(self, raw, expected):
        assert ConvertOptions.from_mapping({"showNodeClass": raw}).show_node_class is expected

    def test_unknown_and_null_keys_ignored(self):
        assert ConvertOptions.from_mapping({"theme": "dark", "includeJs": None}) == ConvertOptions()

    def test_invalid_enum(self):
        with pytest.raises(OptionsError, match="inlineStyleHandling"):
            ConvertOptions.from_mapping({"inlineStyleHandling": "bogus"})

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            ConvertOptions().include_js = False  # type: ignore[misc]
