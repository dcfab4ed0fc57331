"""Scripts, interactive widgets and the catch-all for unknown tags."""

from __future__ import annotations

from bs4 import Tag

from brickify.builder.context import TAG_LABELS, BuildContext
from brickify.builder.model import Container, Leaf, ProcessorResult, Skip

MISC_TAGS = ("canvas", "details", "summary", "dialog", "meter", "progress", "script")


def code_settings(source: str) -> dict:
    return {"executeCode": True, "noRoot": True, "javascriptCode": source.strip()}


class ScriptProcessor:
    """Inline ``<script>`` bodies become code elements.

    Scripts are dropped entirely when JavaScript output is disabled; external
    scripts fall through to the misc processor.
    """

    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        if element.name != "script":
            return False
        return not ctx.options.include_js or (
            not element.has_attr("src") and bool(element.get_text().strip())
        )

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        if not ctx.options.include_js:
            return Skip()
        node = ctx.new_node("code", code_settings(element.get_text()), label="Script")
        return Leaf(node)


class MiscProcessor:
    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        return element.name in MISC_TAGS

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        settings = {"tag": "custom", "customTag": element.name}
        return Container(ctx.new_node("div", settings, label=ctx.label_for(element)))


class GenericProcessor:
    """Any tag nothing else claims: a div rendered with the original tag."""

    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        return True

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        tag = element.name
        label = ctx.label_for(element, TAG_LABELS.get(tag, tag.upper()))
        settings = {"tag": "custom", "customTag": tag}
        return Container(ctx.new_node("div", settings, label=label))
