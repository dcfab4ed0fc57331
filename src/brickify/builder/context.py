"""Per-run state shared by the walker, the processors and the styler."""

from __future__ import annotations

from typing import Any, Callable

from bs4 import Tag

from brickify.builder.dom import classes_of
from brickify.builder.model import ElementNode
from brickify.cascade.matcher import PerClassMatch, SelectorMatcher
from brickify.classes import GlobalClassRegistry
from brickify.config import ConvertOptions
from brickify.mappers.registry import MapperRegistry
from brickify.stylesheet.model import StyleDeclarationMap

TAG_LABELS: dict[str, str] = {
    "div": "Div",
    "section": "Section",
    "header": "Header",
    "footer": "Footer",
    "main": "Main",
    "aside": "Aside",
    "article": "Article",
    "nav": "Navigation",
    "figure": "Figure",
    "p": "Paragraph",
    "span": "Span",
    "blockquote": "Block Quote",
    "address": "Address",
    "time": "Time",
    "mark": "Mark",
    "strong": "Strong",
    "em": "Emphasis",
    "small": "Small",
    "h1": "H1 Heading",
    "h2": "H2 Heading",
    "h3": "H3 Heading",
    "h4": "H4 Heading",
    "h5": "H5 Heading",
    "h6": "H6 Heading",
    "ul": "List",
    "ol": "Ordered List",
    "li": "List Item",
    "table": "Table",
    "thead": "Table Header",
    "tbody": "Table Body",
    "tfoot": "Table Footer",
    "tr": "Table Row",
    "th": "Header Cell",
    "td": "Table Cell",
    "form": "Form",
    "button": "Button",
    "label": "Label",
    "img": "Image",
    "video": "Video",
    "audio": "Audio",
    "svg": "SVG",
    "a": "Link",
    "canvas": "Canvas",
    "details": "Details",
    "summary": "Summary",
    "dialog": "Dialog",
    "meter": "Meter",
    "progress": "Progress",
    "script": "Script",
}


class BuildContext:
    """Everything a processor may read or extend during one conversion."""

    def __init__(
        self,
        options: ConvertOptions,
        ids: Callable[[], str],
        style_map: StyleDeclarationMap,
        matcher: SelectorMatcher,
        mappers: MapperRegistry,
        classes: GlobalClassRegistry,
    ) -> None:
        self.options = options
        self.ids = ids
        self.style_map = style_map
        self.matcher = matcher
        self.mappers = mappers
        self.classes = classes

    @property
    def variables(self) -> dict[str, str]:
        return self.style_map.variables

    def new_node(
        self,
        name: str,
        settings: dict[str, Any] | None = None,
        label: str | None = None,
    ) -> ElementNode:
        return ElementNode(id=self.ids(), name=name, settings=settings or {}, label=label)

    def label_for(self, element: Tag, default: str | None = None) -> str:
        """First class name when ``show_node_class`` is on, else the tag label."""
        if self.options.show_node_class:
            classes = classes_of(element)
            if classes:
                return classes[0]
        if default is not None:
            return default
        return TAG_LABELS.get(element.name, element.name.upper())

    def class_ids_for(
        self,
        element: Tag,
        names: list[str] | None = None,
        match: PerClassMatch | None = None,
    ) -> list[str]:
        """Resolve *names* (default: the element's classes) to global class ids.

        Each class receives the declarations matched for it; the first one
        also receives those of tag and id selectors.
        """
        if names is None:
            names = classes_of(element)
        if not names:
            return []
        if match is None:
            match = self.matcher.match_per_class(element, classes_of(element))
        ids = []
        for index, name in enumerate(names):
            cls = self.classes.get_or_create(name)
            own = match.properties_by_class.get(name, {})
            declarations = {**match.common_properties, **own} if index == 0 else own
            if declarations:
                self.classes.merge(cls, declarations, variables=self.variables)
            ids.append(cls.id)
        return ids
