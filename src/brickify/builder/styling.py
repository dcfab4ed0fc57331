"""Attach matched CSS, inline styles and attributes to emitted nodes.

Two targets are supported. In class mode, declarations go to global
classes shared by every element carrying the same class name. In id mode
(always used for elements with an ``id``), the merged cascade is mapped
straight onto the node's own settings.
"""

from __future__ import annotations

import logging
from typing import Any

from bs4 import Tag

from brickify.builder.context import BuildContext
from brickify.builder.dom import attr, classes_of
from brickify.builder.model import ElementNode
from brickify.cascade.matcher import SelectorDeclarations
from brickify.cascade.selectors import PSEUDO_STATES, class_names, pseudo_state
from brickify.classes import GlobalStyleClass, merge_settings, store_pseudo
from brickify.config import SelectorTarget, StyleMode
from brickify.mappers.registry import append_custom_css, custom_css_block
from brickify.mappers.values import class_selector
from brickify.stylesheet.parser import parse_declarations

log = logging.getLogger(__name__)

# Attributes consumed by processors or by the builder itself.
ELEMENT_SPECIFIC_ATTRIBUTES = frozenset({
    "id", "class", "href", "src", "alt", "title", "type", "name", "value",
    "placeholder", "required", "disabled", "checked", "selected", "multiple",
    "rows", "cols",
})


def anchor_link(element: Tag) -> dict[str, Any]:
    rel = attr(element, "rel").split()
    return {
        "type": "external",
        "url": attr(element, "href"),
        "noFollow": "nofollow" in rel,
        "openInNewWindow": attr(element, "target") == "_blank",
        "noReferrer": "noreferrer" in rel,
    }


def generated_class_name(element: Tag, node: ElementNode) -> str:
    return f"{element.name}-tag-{node.id}-class"


class ElementStyler:
    """Styles one element's node; called by the walker after processing."""

    def __init__(self, ctx: BuildContext) -> None:
        self.ctx = ctx

    def style(self, element: Tag, node: ElementNode) -> None:
        options = self.ctx.options
        if element.get("id") or options.css_selector_target is SelectorTarget.ID:
            self.style_by_id(element, node)
        else:
            self.style_by_class(element, node)
        self.apply_inline_styles(element, node)
        self.apply_attributes(element, node)

    # ------------------------------------------------------------------
    # Class target
    # ------------------------------------------------------------------

    def style_by_class(self, element: Tag, node: ElementNode) -> None:
        classes = classes_of(element)
        match = self.ctx.matcher.match_per_class(element, classes)

        targets = list(classes) or [generated_class_name(element, node)]

        class_ids = self.ctx.class_ids_for(element, targets, match)
        first = self.ctx.classes.get_or_create(targets[0])
        self._route_pseudo(element, first, match.pseudo_selectors)
        self._route_complex(element, first, match.complex_selectors)
        node.settings["_cssGlobalClasses"] = class_ids

    def _route_pseudo(
        self,
        element: Tag,
        first: GlobalStyleClass,
        entries: list[SelectorDeclarations],
    ) -> None:
        registry = self.ctx.classes
        classes = classes_of(element)
        merge_foreign = self.ctx.options.merge_non_class_selectors
        for entry in entries:
            base, state = pseudo_state(entry.selector) or (entry.selector, "")
            if state not in PSEUDO_STATES:
                registry.append_custom_css(first, self._literal(entry))
                continue
            owner = next(
                (registry.find(c) for c in classes if base == class_selector(c)), None
            )
            if owner is None and self._targets_element(element, base):
                owner = first
            if owner is None and merge_foreign and self._mentions_element(classes, base):
                owner = first
            if owner is None:
                registry.append_custom_css(first, self._literal(entry))
                continue
            registry.merge_pseudo(
                owner, state, entry.declarations, variables=self.ctx.variables
            )

    def _route_complex(
        self,
        element: Tag,
        first: GlobalStyleClass,
        entries: list[SelectorDeclarations],
    ) -> None:
        registry = self.ctx.classes
        classes = classes_of(element)
        merge_foreign = self.ctx.options.merge_non_class_selectors
        for entry in entries:
            if merge_foreign and (
                entry.selector == element.name or self._mentions_element(classes, entry.selector)
            ):
                registry.merge(first, entry.declarations, variables=self.ctx.variables)
            else:
                registry.append_custom_css(first, self._literal(entry))

    @staticmethod
    def _targets_element(element: Tag, base: str) -> bool:
        if base in ("*", element.name):
            return True
        element_id = attr(element, "id")
        if element_id and base == f"#{element_id}":
            return True
        return any(base == class_selector(c) for c in classes_of(element))

    @staticmethod
    def _mentions_element(classes: list[str], selector: str) -> bool:
        return "[" in selector or any(name in classes for name in class_names(selector))

    @staticmethod
    def _literal(entry: SelectorDeclarations) -> str:
        return custom_css_block(entry.selector, entry.declarations.items())

    # ------------------------------------------------------------------
    # Id target
    # ------------------------------------------------------------------

    def style_by_id(self, element: Tag, node: ElementNode) -> None:
        match = self.ctx.matcher.match_merged(element)
        selector = self.id_selector(element, node)
        variables = self.ctx.variables
        if match.properties:
            self.ctx.mappers.apply(
                match.properties, node.settings, selector=selector, variables=variables
            )
        for entry in match.pseudo_selectors:
            base, state = pseudo_state(entry.selector) or (entry.selector, "")
            if state in PSEUDO_STATES and self._targets_element(element, base):
                scratch = self.ctx.mappers.apply(
                    entry.declarations, {}, selector=f"{selector}:{state}", variables=variables
                )
                store_pseudo(node.settings, state, scratch)
            else:
                append_custom_css(node.settings, self._literal(entry))

    @staticmethod
    def id_selector(element: Tag, node: ElementNode) -> str:
        element_id = attr(element, "id")
        return f"#{element_id}" if element_id else f"#brxe-{node.id}"

    # ------------------------------------------------------------------
    # Inline styles and attributes
    # ------------------------------------------------------------------

    def apply_inline_styles(self, element: Tag, node: ElementNode) -> None:
        style = attr(element, "style").strip()
        mode = self.ctx.options.inline_style_handling
        if not style or mode is not StyleMode.CLASS:
            return

        declarations = {d.property: d.value for d in parse_declarations(style)}
        if not declarations:
            return
        class_ids = node.settings.get("_cssGlobalClasses") or []
        cls = self.ctx.classes.get(class_ids[0]) if class_ids else None
        if cls is not None:
            mapped = self.ctx.mappers.apply(
                declarations, {}, selector=class_selector(cls.name), variables=self.ctx.variables
            )
            merge_settings(cls.settings, mapped)
            return

        element_id = attr(element, "id")
        selector = f"#{element_id}" if element_id else "%element%"
        log.debug("Inline style on <%s> kept as custom CSS under %s", element.name, selector)
        append_custom_css(node.settings, custom_css_block(selector, declarations.items()))

    def apply_attributes(self, element: Tag, node: ElementNode) -> None:
        settings = node.settings
        tag = element.name
        element_id = attr(element, "id")
        if element_id:
            settings["_cssId"] = element_id

        entries: list[dict[str, str]] = list(settings.get("_attributes", []))
        seen = {e["name"] for e in entries}

        def add(name: str, value: str) -> None:
            if name in seen:
                return
            seen.add(name)
            entries.append({"id": self.ctx.ids(), "name": name, "value": value})

        for name in element.attrs:
            if name in ELEMENT_SPECIFIC_ATTRIBUTES or name == "style":
                continue
            if name.startswith("data-bricks-"):
                continue
            if tag == "a" and name in ("target", "rel"):
                continue
            add(name, attr(element, name))

        if self.ctx.options.inline_style_handling is StyleMode.INLINE:
            style = attr(element, "style").strip()
            if style:
                add("style", style)

        if entries:
            settings["_attributes"] = entries
        if tag == "a" and element.get("href") is not None and "link" not in settings:
            settings["link"] = anchor_link(element)

