"""Assemble the final clipboard document from the arena and class registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from brickify.builder.model import ROOT_PARENT, ElementArena, ElementNode
from brickify.classes import GlobalClassRegistry, GlobalStyleClass
from brickify.config import SCHEMA_VERSION, SOURCE, SOURCE_URL
from brickify.stylesheet.model import StyleDeclarationMap

log = logging.getLogger(__name__)

ROOT_STYLES_CLASS = "root-styles"
ANIMATIONS_CLASS = "animations"
CUSTOM_CSS_CLASS = "custom-css"


@dataclass
class OutputDocument:
    content: list[dict[str, Any]] = field(default_factory=list)
    global_classes: list[dict[str, Any]] = field(default_factory=list)
    source: str = SOURCE
    source_url: str = SOURCE_URL
    version: str = SCHEMA_VERSION

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": self.content,
            "source": self.source,
            "sourceUrl": self.source_url,
            "version": self.version,
            "globalClasses": self.global_classes,
            "globalElements": [],
        }


def _target_class(arena: ElementArena, registry: GlobalClassRegistry) -> GlobalStyleClass | None:
    """The first class of the first content node, else the first class made."""
    for node in arena:
        class_ids = node.settings.get("_cssGlobalClasses") or []
        if class_ids:
            cls = registry.get(class_ids[0])
            if cls is not None:
                return cls
            break
    return registry.first()


def _inject_stylesheet_text(
    arena: ElementArena,
    registry: GlobalClassRegistry,
    style_map: StyleDeclarationMap,
) -> None:
    target = _target_class(arena, registry)

    if style_map.root_styles:
        cls = target or registry.get_or_create(ROOT_STYLES_CLASS)
        registry.append_custom_css(cls, style_map.root_styles, prepend=True)
        target = target or cls

    if style_map.keyframes:
        cls = target or registry.get_or_create(ANIMATIONS_CLASS)
        for frames in style_map.keyframes:
            registry.append_custom_css(cls, frames.rule)

    if style_map.media_queries:
        cls = target or registry.get_or_create(CUSTOM_CSS_CLASS)
        for block in style_map.media_queries:
            registry.append_custom_css(cls, block)


def _attach_script(arena: ElementArena, js: str, id_factory: Callable[[], str]) -> ElementNode:
    roots = arena.roots()
    parent = roots[0].id if roots else ROOT_PARENT
    node = ElementNode(
        id=id_factory(),
        name="code",
        settings={"executeCode": True, "noRoot": True, "javascriptCode": js.strip()},
        label="Custom JavaScript",
    )
    return arena.add(node, parent)


def assemble(
    arena: ElementArena,
    registry: GlobalClassRegistry,
    style_map: StyleDeclarationMap,
    *,
    id_factory: Callable[[], str],
    js: str | None = None,
    include_js: bool = True,
) -> OutputDocument:
    """Combine elements, classes and leftover stylesheet text into one document.

    ``:root`` blocks, ``@keyframes`` and ``@media`` text have no structured
    home, so they are carried as custom CSS on a single class.
    """
    _inject_stylesheet_text(arena, registry, style_map)
    if include_js and js and js.strip():
        _attach_script(arena, js, id_factory)

    log.debug("Assembled %d elements and %d classes", len(arena), len(registry))
    return OutputDocument(content=arena.to_list(), global_classes=registry.to_list())
