"""Layout containers: sections, containers, blocks and plain divs."""

from __future__ import annotations

from bs4 import Tag

from brickify.builder.context import BuildContext
from brickify.builder.dom import classes_of
from brickify.builder.model import Container, ProcessorResult
from brickify.config import CONTAINER_CLASS_PATTERNS

LAYOUT_TAGS = ("section", "article", "aside", "main", "header", "footer", "figure", "nav")
BLOCK_CLASSES = frozenset({"container-fluid", "full-width", "fullwidth"})
CONTAINER_CLASSES = frozenset({"container", "boxed"})
STRUCTURE_CLASSES = frozenset({"container", "row", "section"})

# Tags the section element can render natively; anything else is custom.
NATIVE_SECTION_TAGS = ("div", "section", "article", "nav", "aside")


def _is_structural(element: Tag) -> bool:
    if element.name in LAYOUT_TAGS:
        return True
    if element.name != "div":
        return False
    return any(
        c in STRUCTURE_CLASSES
        or c in BLOCK_CLASSES
        or c in CONTAINER_CLASS_PATTERNS
        or c.startswith("col-")
        for c in classes_of(element)
    )


class StructureProcessor:
    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        return _is_structural(element)

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        tag = element.name

        if tag == "div":
            classes = set(classes_of(element))
            if classes & BLOCK_CLASSES:
                name, default = "block", "Block"
            elif classes & CONTAINER_CLASSES:
                name, default = "container", "Container"
            elif "section" in classes:
                name, default = "section", "Section"
            else:
                name, default = "div", "Div"
            node = ctx.new_node(name, {"tag": "div"}, label=ctx.label_for(element, default))
            return Container(node)

        node = ctx.new_node("section", label=ctx.label_for(element))
        if tag in NATIVE_SECTION_TAGS:
            node.settings["tag"] = tag
        else:
            node.settings["tag"] = "custom"
            node.settings["customTag"] = tag
        return Container(node)


class DivProcessor:
    """Any remaining ``<div>``."""

    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        return element.name == "div"

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        return Container(ctx.new_node("div", {"tag": "div"}, label=ctx.label_for(element, "Div")))
