"""Headings and text-level elements."""

from __future__ import annotations

from bs4 import Tag

from brickify.builder.context import BuildContext
from brickify.builder.dom import HEADING_TAGS, classes_of, element_children, inner_html, text_of
from brickify.builder.model import Leaf, ProcessorResult

TEXT_TAGS = ("time", "mark", "span", "address", "p", "blockquote")

# Inline children that make a text element rich (HTML content kept).
FORMATTING_TAGS = frozenset({
    "strong", "em", "b", "i", "u", "s", "mark", "small", "sub", "sup", "del",
    "ins", "code", "kbd", "var", "samp", "abbr", "cite", "q", "dfn", "span", "a",
})


def is_rich(element: Tag) -> bool:
    return any(child.name in FORMATTING_TAGS for child in element_children(element))


class HeadingProcessor:
    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        return element.name in HEADING_TAGS

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        tag = element.name
        classes = classes_of(element)
        label = classes[0] if classes else f"{tag.upper()} Heading"
        node = ctx.new_node("heading", {"tag": tag, "text": text_of(element)}, label=label)
        return Leaf(node)


class TextProcessor:
    """Paragraphs, quotes and inline text containers.

    Elements with formatting children keep their inner HTML in a rich text
    node; everything else becomes basic text.
    """

    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        return element.name in TEXT_TAGS

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        tag = element.name
        rich = is_rich(element)
        settings = {"text": inner_html(element) if rich else text_of(element)}
        name = "text" if rich else "text-basic"

        if tag == "p":
            settings["tag"] = "p"
            label = ctx.label_for(element)
        elif tag == "blockquote":
            settings["tag"] = "custom"
            settings["customTag"] = "blockquote"
            label = ctx.label_for(element)
        else:
            settings["tag"] = "span"
            label = ctx.label_for(element, "Rich Text" if rich else "Text")
        return Leaf(ctx.new_node(name, settings, label=label))
