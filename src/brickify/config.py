"""Conversion options and schema constants."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping

from brickify.errors import OptionsError

SOURCE = "bricksCopiedElements"
SOURCE_URL = "https://brickify.netlify.app"
SCHEMA_VERSION = "2.1.4"

# Exact class names that route a <div> to the alert processor.
ALERT_CLASS_PATTERNS: tuple[str, ...] = (
    "alert", "notification", "message", "toast", "msg", "flash", "banner",
    "notice", "warning", "error", "success", "info", "callout", "hint", "tip",
    "note", "status",
)

CONTAINER_CLASS_PATTERNS: tuple[str, ...] = ("container", "boxed", "wrapper", "content")

NAV_CLASS_PATTERNS: tuple[str, ...] = (
    "nav", "menu", "navigation", "links", "navbar", "main-nav", "primary-nav",
    "header-nav", "site-nav", "top-nav", "subnav", "submenu", "breadcrumb",
    "pagination",
)


class StyleMode(Enum):
    """What to do with an element's inline ``style`` attribute."""

    SKIP = "skip"
    INLINE = "inline"
    CLASS = "class"


class SelectorTarget(Enum):
    """Where matched declarations are written."""

    CLASS = "class"
    ID = "id"


# camelCase keys accepted from JSON payloads and the JS-era API.
_CAMEL_KEYS = {
    "inlineStyleHandling": "inline_style_handling",
    "showNodeClass": "show_node_class",
    "mergeNonClassSelectors": "merge_non_class_selectors",
    "cssSelectorTarget": "css_selector_target",
    "includeJs": "include_js",
}


@dataclass(frozen=True)
class ConvertOptions:
    inline_style_handling: StyleMode = StyleMode.CLASS
    show_node_class: bool = False
    merge_non_class_selectors: bool = False
    css_selector_target: SelectorTarget = SelectorTarget.CLASS
    include_js: bool = True

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "ConvertOptions":
        """Build options from a camelCase or snake_case mapping.

        Unknown keys are ignored; invalid enum values raise OptionsError.
        """
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_KEYS.get(key, key)
            if name not in known or value is None:
                continue
            kwargs[name] = value

        if "inline_style_handling" in kwargs:
            kwargs["inline_style_handling"] = _coerce_enum(
                StyleMode, kwargs["inline_style_handling"], "inlineStyleHandling"
            )
        if "css_selector_target" in kwargs:
            kwargs["css_selector_target"] = _coerce_enum(
                SelectorTarget, kwargs["css_selector_target"], "cssSelectorTarget"
            )
        for flag in ("show_node_class", "merge_non_class_selectors", "include_js"):
            if flag in kwargs:
                kwargs[flag] = _coerce_bool(kwargs[flag])
        return cls(**kwargs)


def _coerce_enum(enum_cls: type[Enum], value: object, option: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)  # type: ignore[attr-defined]
        raise OptionsError(f"Invalid {option}: {value!r} (expected one of {allowed})") from None


def _coerce_bool(value: object) -> bool:
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes")
    return bool(value)
