"""Navigation menus: rebuilt as a nested nav with items, dropdowns and toggles."""

from __future__ import annotations

import soupsieve
from bs4 import Tag

from brickify.builder.context import BuildContext
from brickify.builder.dom import attr, classes_of, text_of
from brickify.builder.model import Composite, ElementNode, ProcessorResult
from brickify.config import NAV_CLASS_PATTERNS

REGULAR_LINKS = 'a:not(.dropdown-toggle):not([data-toggle="dropdown"])'
DROPDOWN_MENUS = ".dropdown-menu, .dropdown-content"
DROPDOWNS = '.dropdown, .has-dropdown, [data-toggle="dropdown"]'
DROPDOWN_TOGGLE = ".dropdown-toggle, a"
DROPDOWN_LINKS = ".dropdown-menu a, .dropdown-content a"


class NavProcessor:
    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        if element.name == "nav":
            return True
        return element.name == "div" and any(
            c in NAV_CLASS_PATTERNS for c in classes_of(element)
        )

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        nodes: list[ElementNode] = []

        nav = ctx.new_node(
            "nav-nested",
            {
                "dropdownPadding": {"top": "12", "right": "12", "bottom": "12", "left": "12"},
                "dropdownItemBackground:hover": {
                    "hex": "#398378",
                    "rgb": "rgba(57, 131, 120, 0.1)",
                    "hsl": "hsla(171, 39%, 37%, 0.1)",
                },
            },
            label=ctx.label_for(element, "Navigation"),
        )
        class_ids = ctx.class_ids_for(element)
        if class_ids:
            nav.settings["_cssGlobalClasses"] = class_ids
        nodes.append(nav)

        items = ctx.new_node(
            "block",
            {"tag": "ul", "_hidden": {"_cssClasses": "brx-nav-nested-items"}},
            label="Nav items",
        )
        _attach(nav, items)
        nodes.append(items)

        for link in element.select(REGULAR_LINKS):
            if soupsieve.closest(DROPDOWN_MENUS, link) is None:
                nodes.append(_attach(items, self._link(link, ctx)))

        for dropdown in element.select(DROPDOWNS):
            toggle = dropdown.select_one(DROPDOWN_TOGGLE)
            text = text_of(toggle) if toggle is not None else ""
            menu = ctx.new_node("dropdown", {"text": text or "Dropdown"}, label="Dropdown")
            content = ctx.new_node(
                "div",
                {"_hidden": {"_cssClasses": "brx-dropdown-content"}, "tag": "ul"},
                label="Content",
            )
            nodes.append(_attach(items, menu))
            nodes.append(_attach(menu, content))
            for link in dropdown.select(DROPDOWN_LINKS):
                nodes.append(_attach(content, self._link(link, ctx)))

        close_toggle = ctx.new_node(
            "toggle",
            {"_hidden": {"_cssClasses": "brx-toggle-div"}},
            label="Toggle (Close: Mobile)",
        )
        open_toggle = ctx.new_node("toggle", {}, label="Toggle (Open: Mobile)")
        nodes.append(_attach(items, close_toggle))
        nodes.append(_attach(nav, open_toggle))
        return Composite(tuple(nodes))

    @staticmethod
    def _link(link: Tag, ctx: BuildContext) -> ElementNode:
        node = ctx.new_node(
            "text-link",
            {"text": text_of(link), "link": {"type": "external", "url": attr(link, "href") or "#"}},
            label="Nav link",
        )
        class_ids = ctx.class_ids_for(link)
        if class_ids:
            node.settings["_cssGlobalClasses"] = class_ids
        return node


def _attach(parent: ElementNode, child: ElementNode) -> ElementNode:
    child.parent = parent.id
    parent.children.append(child.id)
    return child
