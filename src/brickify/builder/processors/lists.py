"""Ordered and unordered lists."""

from __future__ import annotations

from bs4 import Tag

from brickify.builder.context import BuildContext
from brickify.builder.dom import element_children, inner_html
from brickify.builder.model import Container, Leaf, ProcessorResult
from brickify.builder.processors.text import FORMATTING_TAGS

LIST_TAGS = ("ul", "ol")


def is_simple_list(element: Tag) -> bool:
    """Every item holds only text and inline formatting."""
    items = element_children(element)
    if not items:
        return False
    for item in items:
        if item.name != "li":
            return False
        if any(c.name not in FORMATTING_TAGS for c in element_children(item)):
            return False
    return True


class ListProcessor:
    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        return element.name in LIST_TAGS or element.name == "li"

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        tag = element.name
        if tag == "li":
            node = ctx.new_node("div", {"tag": "li"}, label=ctx.label_for(element, "List Item"))
            return Container(node)

        label = ctx.label_for(element, "Unordered List" if tag == "ul" else "Ordered List")
        if is_simple_list(element):
            settings = {"tag": tag, "text": inner_html(element), "isRichText": True}
            return Leaf(ctx.new_node("text", settings, label=label))

        settings = {"tag": tag, "items": [], "style": "list-style-position: inside;"}
        return Container(ctx.new_node("div", settings, label=label))
