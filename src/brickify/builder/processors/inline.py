"""Inline formatting tags that appear outside any block container."""

from __future__ import annotations

from bs4 import Tag

from brickify.builder.context import BuildContext
from brickify.builder.dom import parent_tag, text_of
from brickify.builder.model import Leaf, ProcessorResult

STANDALONE_TAGS = ("strong", "em", "small", "blockquote")

BLOCK_PARENTS = frozenset({
    "p", "h1", "h2", "h3", "h4", "h5", "h6", "li", "td", "th", "div",
    "section", "article", "aside", "header", "footer", "nav",
})


class StandaloneInlineProcessor:
    """``<strong>`` and friends directly under a non-block parent.

    They become a plain text node that keeps the original tag.
    """

    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        return element.name in STANDALONE_TAGS and parent_tag(element) not in BLOCK_PARENTS

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        node = ctx.new_node(
            "text-basic",
            {"text": text_of(element), "tag": "custom", "customTag": element.name},
            label=ctx.label_for(element),
        )
        return Leaf(node)
