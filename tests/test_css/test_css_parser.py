"""Tests for the CSS stylesheet compiler."""

import pytest

from brickify.errors import StylesheetParseError
from brickify.stylesheet import (
    Declaration,
    parse_declarations,
    parse_stylesheet,
    split_top_level,
    strip_comments,
)


# ---------------------------------------------------------------------------
# Rules and selectors
# ---------------------------------------------------------------------------


class TestRules:
    def test_single_rule(self):
        sm = parse_stylesheet(".title { color: red; font-size: 32px; }")
        assert len(sm.rules) == 1
        rule = sm.rules[0]
        assert rule.selector == ".title"
        assert rule.properties() == {"color": "red", "font-size": "32px"}

    def test_selector_list_splits_into_rules(self):
        sm = parse_stylesheet("h1, .title , #main { margin: 0; }")
        assert [r.selector for r in sm.rules] == ["h1", ".title", "#main"]
        assert len({r.order for r in sm.rules}) == 1

    def test_source_order_increases(self):
        sm = parse_stylesheet(".a { color: red; } .b { color: blue; }")
        assert sm.rules[0].order < sm.rules[1].order

    def test_selector_whitespace_is_normalised(self):
        sm = parse_stylesheet(".card\n   .title { color: red; }")
        assert sm.rules[0].selector == ".card .title"

    def test_attribute_selector_with_quotes(self):
        sm = parse_stylesheet('a[href="https://x.com"] { color: red; }')
        assert sm.rules[0].selector == 'a[href="https://x.com"]'

    def test_selectors_are_distinct_in_first_seen_order(self):
        sm = parse_stylesheet(".a { color: red; } .b { color: blue; } .a { margin: 0; }")
        assert sm.selectors() == [".a", ".b"]

    def test_declarations_for_merges_blocks(self):
        sm = parse_stylesheet(".a { color: red; } .a { color: blue; margin: 0; }")
        assert sm.declarations_for(".a") == {"color": "blue", "margin": "0"}

    def test_empty_source(self):
        sm = parse_stylesheet("")
        assert sm.is_empty
        assert sm.rules == ()

    def test_comments_are_ignored(self):
        sm = parse_stylesheet("/* header */ .a { /* inner */ color: red; }")
        assert sm.rules[0].properties() == {"color": "red"}


# ---------------------------------------------------------------------------
# Custom properties, :root, at-rules
# ---------------------------------------------------------------------------


class TestRootAndAtRules:
    def test_root_variables_collected(self):
        sm = parse_stylesheet(":root { --brand: #ff0000; --gap: 8px; }")
        assert sm.variables == {"--brand": "#ff0000", "--gap": "8px"}

    def test_root_styles_text(self):
        sm = parse_stylesheet(":root { --brand: #ff0000; }")
        assert sm.root_styles == ":root {\n  --brand: #ff0000;\n}"

    def test_keyframes_kept_as_text(self):
        sm = parse_stylesheet(
            "@keyframes spin { from { transform: rotate(0deg); } to { transform: rotate(360deg); } }"
        )
        assert len(sm.keyframes) == 1
        assert sm.keyframes[0].name == "spin"
        assert sm.keyframes[0].rule.startswith("@keyframes spin")
        assert sm.rules == ()

    def test_media_kept_as_text(self):
        sm = parse_stylesheet("@media (max-width: 600px) { .a { color: red; } } .b { color: blue; }")
        assert len(sm.media_queries) == 1
        assert sm.media_queries[0].startswith("@media (max-width: 600px)")
        assert [r.selector for r in sm.rules] == [".b"]

    def test_statement_at_rules_are_dropped(self):
        sm = parse_stylesheet('@import url("base.css"); .a { color: red; }')
        assert [r.selector for r in sm.rules] == [".a"]
        assert sm.media_queries == ()


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class TestMalformed:
    def test_lenient_returns_empty_map(self):
        sm = parse_stylesheet(".a { color: red;")
        assert sm.is_empty

    def test_strict_raises(self):
        with pytest.raises(StylesheetParseError):
            parse_stylesheet(".a { color: red;", strict=True)

    def test_stray_closing_brace_strict(self):
        with pytest.raises(StylesheetParseError):
            parse_stylesheet("} .a { color: red; }", strict=True)


# ---------------------------------------------------------------------------
# Declarations and helpers
# ---------------------------------------------------------------------------


class TestDeclarations:
    def test_basic(self):
        assert parse_declarations("color: red; margin: 0") == (
            Declaration("color", "red"),
            Declaration("margin", "0"),
        )

    def test_important_flag(self):
        (decl,) = parse_declarations("color: red !important")
        assert decl.value == "red"
        assert decl.important is True
        assert str(decl) == "color: red !important"

    def test_semicolon_inside_url(self):
        decls = parse_declarations("background: url(data:image/png;base64,AAA); color: red")
        assert [d.property for d in decls] == ["background", "color"]
        assert decls[0].value == "url(data:image/png;base64,AAA)"

    def test_property_lowercased_but_custom_kept(self):
        decls = parse_declarations("COLOR: Red; --Brand: Blue")
        assert decls[0] == Declaration("color", "Red")
        assert decls[1] == Declaration("--Brand", "Blue")

    def test_invalid_chunks_skipped(self):
        assert parse_declarations("color; : red; margin:") == ()


class TestHelpers:
    def test_strip_comments(self):
        assert strip_comments("a /* x */ b") == "a  b"

    def test_strip_comments_keeps_strings(self):
        assert strip_comments('content: "/* not */"') == 'content: "/* not */"'

    def test_split_top_level_commas(self):
        assert split_top_level("a, b(c, d), 'e,f'", ",") == ["a", "b(c, d)", "'e,f'"]

    def test_split_top_level_whitespace(self):
        assert split_top_level("1px  solid\trgb(0, 0, 0)", " ") == ["1px", "solid", "rgb(0, 0, 0)"]
