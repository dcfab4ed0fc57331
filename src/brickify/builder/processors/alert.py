"""Alert boxes: divs carrying a notification-style class."""

from __future__ import annotations

from bs4 import Tag

from brickify.builder.context import BuildContext
from brickify.builder.dom import attr, classes_of, inner_html
from brickify.builder.model import Leaf, ProcessorResult
from brickify.config import ALERT_CLASS_PATTERNS

ALERT_TYPES = ("success", "info", "warning", "danger")


def is_alert_class(name: str) -> bool:
    return name in ALERT_CLASS_PATTERNS or name.startswith("alert-")


def alert_type(classes: list[str]) -> str:
    """``success``/``is-success``/``alert-success`` style classes pick the type."""
    found = "info"
    for name in classes:
        for prefix in ("is-", "alert-"):
            if name.startswith(prefix) and name[len(prefix):] in ALERT_TYPES:
                found = name[len(prefix):]
        if name in ALERT_TYPES:
            found = name
    return found


class AlertProcessor:
    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        return element.name == "div" and any(is_alert_class(c) for c in classes_of(element))

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        dismissable = True
        if element.has_attr("data-dismissable"):
            dismissable = attr(element, "data-dismissable") != "false"
        settings = {
            "content": inner_html(element) or "<p>Alert content</p>",
            "type": alert_type(classes_of(element)),
            "dismissable": dismissable,
        }
        return Leaf(ctx.new_node("alert", settings, label=ctx.label_for(element, "Alert")))
