"""Anchors: text links, or link wrappers around richer content."""

from __future__ import annotations

from bs4 import Tag

from brickify.builder.context import BuildContext
from brickify.builder.dom import has_only_text, text_of
from brickify.builder.model import Container, Leaf, ProcessorResult
from brickify.builder.styling import anchor_link


class LinkProcessor:
    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        return element.name == "a"

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        link = anchor_link(element)
        if has_only_text(element):
            settings = {"text": text_of(element) or "Link", "link": link, "tag": "a"}
            return Leaf(ctx.new_node("text-link", settings, label=ctx.label_for(element, "Link")))
        node = ctx.new_node("div", {"tag": "a", "link": link}, label=ctx.label_for(element, "Link"))
        return Container(node)
