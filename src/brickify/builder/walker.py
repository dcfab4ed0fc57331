"""Depth-first walk of the DOM into a flat element arena.

The walk uses an explicit stack, so nesting depth is bounded by memory
rather than by the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from bs4 import BeautifulSoup, NavigableString, PageElement, Tag

from brickify.builder.context import BuildContext
from brickify.builder.dom import (
    HEADING_TAGS,
    closest,
    head_nodes,
    is_empty,
    is_text,
    parent_tag,
    top_level_nodes,
)
from brickify.builder.model import (
    ROOT_PARENT,
    Composite,
    Container,
    ElementArena,
    ElementNode,
    ProcessorResult,
    Skip,
)
from brickify.builder.processors import ProcessorRegistry, create_default_processors
from brickify.builder.styling import ElementStyler

log = logging.getLogger(__name__)

# Document metadata and embedded sources; never rendered as elements.
NON_RENDERED_TAGS = frozenset({
    "head", "meta", "link", "title", "base", "style", "template", "noscript",
})
PRUNABLE_TAGS = ("p", "span")


class TreeBuilder:
    """Builds the element arena for one document."""

    def __init__(
        self,
        ctx: BuildContext,
        processors: ProcessorRegistry | None = None,
        styler: ElementStyler | None = None,
    ) -> None:
        self.ctx = ctx
        self.processors = processors or create_default_processors()
        self.styler = styler or ElementStyler(ctx)
        self.arena = ElementArena()

    def build(self, soup: BeautifulSoup) -> ElementArena:
        """Walk ``<body>``; fall back to ``<head>`` children when it yields nothing."""
        self.walk(top_level_nodes(soup), ROOT_PARENT)
        if not len(self.arena):
            heads = head_nodes(soup)
            if heads:
                log.debug("Body produced no elements; walking %d head children", len(heads))
                self.walk(heads, ROOT_PARENT, include_metadata=True)
        return self.arena

    def walk(
        self,
        nodes: Iterable[PageElement],
        parent: str,
        *,
        include_metadata: bool = False,
    ) -> None:
        stack: list[tuple[PageElement, str]] = [(n, parent) for n in reversed(list(nodes))]
        while stack:
            dom_node, parent_id = stack.pop()
            if is_text(dom_node):
                self._emit_text(dom_node, parent_id)
                continue
            if not isinstance(dom_node, Tag):
                continue

            result = self._process(dom_node, include_metadata)
            if isinstance(result, Skip):
                continue
            if isinstance(result, Composite):
                root = result.root
                self.arena.add(root, parent_id)
                for node in result.nodes[1:]:
                    self.arena.add(node, node.parent)
                self._style(self.styler.apply_attributes, dom_node, root)
                continue

            node = self.arena.add(result.node, parent_id)
            self._style(self.styler.style, dom_node, node)
            if isinstance(result, Container):
                children = list(dom_node.children)
                stack.extend((child, node.id) for child in reversed(children))

    def _process(self, element: Tag, include_metadata: bool) -> ProcessorResult:
        if element.name in NON_RENDERED_TAGS and not include_metadata:
            return Skip()
        if element.name in ("style", "template"):
            return Skip()
        if element.name in PRUNABLE_TAGS and is_empty(element):
            log.debug("Pruned empty <%s>", element.name)
            return Skip()
        try:
            return self.processors.process(element, self.ctx)
        except Exception as e:  # noqa: BLE001 - one bad element must not abort the document
            log.warning("Skipping <%s>: %s", element.name, e)
            return Skip()

    @staticmethod
    def _style(step: Callable[[Tag, ElementNode], None], element: Tag, node: ElementNode) -> None:
        try:
            step(element, node)
        except Exception as e:  # noqa: BLE001 - the node is kept unstyled
            log.warning("Styling <%s> failed: %s", element.name, e)

    def _emit_text(self, text: NavigableString, parent_id: str) -> None:
        content = text.strip()
        if not content:
            return
        if parent_tag(text) in HEADING_TAGS or closest(text, ("form",)) is not None:
            return
        node = self.ctx.new_node("text-basic", {"text": content, "tag": "p"}, label="Text")
        self.arena.add(node, parent_id)
