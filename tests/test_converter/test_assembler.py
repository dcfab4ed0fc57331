"""Tests for stylesheet text and script placement in the final document."""

from brickify import convert


def _class(doc, name):
    return next(c for c in doc["globalClasses"] if c["name"] == name)


class TestStylesheetText:
    def test_root_styles_prepended_to_first_class(self):
        doc = convert('<div class="a"><p>x</p></div>', ":root { --gap: 4px; } .a { clip-path: none; }")
        custom = _class(doc, "a")["settings"]["_cssCustom"]
        assert custom == ":root {\n  --gap: 4px;\n}\n.a {\n  clip-path: none;\n}"

    def test_root_styles_on_generated_class(self):
        doc = convert("<div><p>x</p></div>", ":root { --gap: 4px; }")
        div = doc["content"][0]
        cls = _class(doc, f"div-tag-{div['id']}-class")
        assert div["settings"]["_cssGlobalClasses"] == [cls["id"]]
        assert cls["settings"] == {"_cssCustom": ":root {\n  --gap: 4px;\n}"}

    def test_root_styles_class_created(self):
        doc = convert("", ":root { --gap: 4px; }")
        (cls,) = doc["globalClasses"]
        assert cls["name"] == "root-styles"
        assert cls["settings"] == {"_cssCustom": ":root {\n  --gap: 4px;\n}"}

    def test_keyframes_class_created(self):
        css = "@keyframes spin { to { transform: rotate(360deg); } }"
        doc = convert("", css)
        (cls,) = doc["globalClasses"]
        assert cls["name"] == "animations"
        assert cls["settings"]["_cssCustom"].startswith("@keyframes spin")

    def test_root_and_keyframes_share_class(self):
        css = ":root { --x: 1; } @keyframes fade { from { opacity: 0; } }"
        doc = convert("", css)
        (cls,) = doc["globalClasses"]
        assert cls["name"] == "root-styles"
        assert "@keyframes fade" in cls["settings"]["_cssCustom"]

    def test_media_class_created(self):
        doc = convert("", "@media print { .a { color: red; } }")
        (cls,) = doc["globalClasses"]
        assert cls["name"] == "custom-css"
        assert cls["settings"]["_cssCustom"] == "@media print { .a { color: red; } }"

    def test_target_is_first_node_class(self):
        doc = convert(
            '<p class="first">a</p><p class="second">b</p>',
            ".second { color: red; } @media print { .first { color: blue; } }",
        )
        assert "@media print" in _class(doc, "first")["settings"]["_cssCustom"]
        assert "_cssCustom" not in _class(doc, "second")["settings"]


class TestScript:
    def test_js_under_first_root(self):
        doc = convert("<div><p>x</p></div>", js="console.log(1);")
        code = doc["content"][-1]
        root = doc["content"][0]
        assert code["name"] == "code"
        assert code["label"] == "Custom JavaScript"
        assert code["parent"] == root["id"]
        assert code["id"] in root["children"]
        assert code["settings"] == {"executeCode": True, "noRoot": True, "javascriptCode": "console.log(1);"}

    def test_js_without_content(self):
        doc = convert("", js="run()")
        (code,) = doc["content"]
        assert code["parent"] == "0"

    def test_js_disabled(self):
        doc = convert("<div></div>", js="run()", options={"includeJs": False})
        assert [n["name"] for n in doc["content"]] == ["div"]

    def test_blank_js_ignored(self):
        assert len(convert("<div></div>", js="  \n")["content"]) == 1
