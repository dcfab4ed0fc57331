"""Tests for the tree walk: arena invariants, pruning, text and depth."""

import pytest

from brickify.builder.model import Composite, ElementArena, ElementNode
from brickify.builder.styling import ElementStyler
from brickify.mappers import typography


def _assert_linked(content):
    by_id = {n["id"]: n for n in content}
    assert len(by_id) == len(content)
    for node in content:
        if node["parent"] != "0":
            assert node["parent"] in by_id
            assert node["id"] in by_id[node["parent"]]["children"]
        for child in node["children"]:
            assert by_id[child]["parent"] == node["id"]


class TestArena:
    def test_add_links_both_ways(self):
        arena = ElementArena()
        parent = arena.add(ElementNode(id="a", name="div"))
        child = arena.add(ElementNode(id="b", name="div"), "a")
        assert parent.children == ["b"]
        assert child.parent == "a"
        assert [n.id for n in arena.roots()] == ["a"]
        assert "b" in arena and len(arena) == 2

    def test_duplicate_id_rejected(self):
        arena = ElementArena()
        arena.add(ElementNode(id="a", name="div"))
        with pytest.raises(ValueError):
            arena.add(ElementNode(id="a", name="div"))

    def test_label_only_when_set(self):
        assert "label" not in ElementNode(id="a", name="div").to_dict()
        assert ElementNode(id="a", name="div", label="Div").to_dict()["label"] == "Div"

    def test_composite_root(self):
        first, second = ElementNode(id="a", name="x"), ElementNode(id="b", name="y")
        assert Composite((first, second)).root is first


class TestWalk:
    def test_tree_is_linked(self, build):
        html = """
        <header><nav><a href="/">Home</a></nav></header>
        <main>
          <section class="hero"><h1>Title</h1><p>Intro <em>text</em></p></section>
          <ul><li><div>One</div></li><li><div>Two</div></li></ul>
        </main>
        <footer><p>Bye</p></footer>
        """
        doc = build(html)
        assert doc["content"]
        _assert_linked(doc["content"])

    def test_document_order(self, build):
        doc = build("<div><h1>A</h1><h2>B</h2></div><h3>C</h3>")
        assert [n["settings"].get("text") for n in doc["content"]] == [None, "A", "B", "C"]

    def test_body_is_walked(self, build):
        doc = build("<html><head><title>T</title></head><body><h1>Hi</h1></body></html>")
        assert [n["name"] for n in doc["content"]] == ["heading"]

    def test_head_fallback(self, build):
        doc = build("<html><head><title>Only</title></head><body></body></html>")
        settings = doc["content"][0]["settings"]
        assert (settings["tag"], settings["customTag"]) == ("custom", "title")

    def test_empty_paragraph_pruned(self, build):
        assert build("<p></p>")["content"] == []

    def test_empty_span_pruned(self, build):
        assert build("<div><span> </span></div>")["content"][0]["children"] == []

    def test_empty_div_kept(self, build):
        doc = build("<div></div>")
        assert len(doc["content"]) == 1
        assert doc["content"][0]["name"] == "div"

    def test_style_and_comments_skipped(self, build):
        doc = build("<div><style>.a{color:red}</style><!-- note --><p>x</p></div>")
        assert [n["name"] for n in doc["content"]] == ["div", "text-basic"]

    def test_loose_text(self, build):
        doc = build("<div>Hello <b>there</b></div>")
        texts = [n for n in doc["content"] if n["name"] == "text-basic"]
        assert texts[0]["settings"] == {"text": "Hello", "tag": "p"}
        assert texts[0]["label"] == "Text"

    def test_root_text(self, build):
        doc = build("just text")
        assert doc["content"][0]["settings"] == {"text": "just text", "tag": "p"}
        assert doc["content"][0]["parent"] == "0"

    def test_deep_nesting(self, build):
        depth = 1200
        doc = build("<div>" * depth + "x" + "</div>" * depth)
        content = doc["content"]
        assert len(content) == depth + 1
        assert content[-1]["settings"]["text"] == "x"
        assert content[-1]["parent"] == content[-2]["id"]
        _assert_linked(content)


class TestContainment:
    def test_styling_failure_keeps_node(self, build, monkeypatch):
        def boom(self, element, node):
            raise RuntimeError("styling failed")

        monkeypatch.setattr(ElementStyler, "style_by_class", boom)
        doc = build('<div class="a"><h1>Title</h1></div><p>After</p>', ".a { color: red; }")
        assert [n["name"] for n in doc["content"]] == ["div", "heading", "text-basic"]
        _assert_linked(doc["content"])

    def test_failing_mapper_falls_back_to_custom_css(self, build, monkeypatch):
        def boom(value, settings):
            raise RuntimeError("mapper failed")

        monkeypatch.setitem(typography.TYPOGRAPHY_MAPPERS, "color", boom)
        doc = build('<h1 class="t">Title</h1><p>After</p>', ".t { color: red; font-size: 20px; }")
        assert [n["name"] for n in doc["content"]] == ["heading", "text-basic"]
        settings = next(c for c in doc["globalClasses"] if c["name"] == "t")["settings"]
        assert settings["_typography"] == {"font-size": 20}
        assert settings["_cssCustom"] == ".t {\n  color: red;\n}"
