"""Border, radius and box-shadow mappers."""

from __future__ import annotations

import re
from typing import Any

from brickify.errors import MapperError
from brickify.mappers.values import (
    expand_box,
    is_color,
    parse_value,
    section,
    split_css_value,
    to_hex,
)

_LENGTH = r"-?\d*\.?\d+(?:px|rem|em|%|vh|vw)?"
_BOX_SHADOW_RE = re.compile(
    rf"(?P<x>{_LENGTH})\s+(?P<y>{_LENGTH})"
    rf"(?:\s+(?P<blur>{_LENGTH}))?(?:\s+(?P<spread>{_LENGTH}))?"
)
_SHADOW_COLOR_RE = re.compile(r"#[0-9a-fA-F]{3,8}|rgba?\([^)]*\)|hsla?\([^)]*\)")
_BORDER_STYLES = {
    "none", "hidden", "dotted", "dashed", "solid", "double",
    "groove", "ridge", "inset", "outset",
}
_DEFAULT_SHADOW_COLOR = "rgba(0,0,0,0.2)"


def _number_text(length: str) -> str:
    return re.sub(r"[^\d.-]", "", length)


def parse_box_shadow(value: str) -> dict[str, Any] | None:
    """First shadow of a ``box-shadow`` value, or None for ``none``."""
    text = value.strip()
    if not text or text == "none":
        return None
    color_match = _SHADOW_COLOR_RE.search(text)
    color = _DEFAULT_SHADOW_COLOR
    if color_match:
        color = re.sub(r"\s*,\s*", ",", color_match.group(0))
        text = text[: color_match.start()] + text[color_match.end() :]
    text = text.replace("inset", "").strip()
    match = _BOX_SHADOW_RE.search(text)
    if not match:
        return None
    return {
        "values": {
            "offsetX": _number_text(match.group("x")),
            "offsetY": _number_text(match.group("y")),
            "blur": _number_text(match.group("blur")) if match.group("blur") else "0",
            "spread": _number_text(match.group("spread")) if match.group("spread") else "0",
        },
        "color": {"rgb" if color.startswith(("rgb", "hsl")) else "hex": color},
    }


def map_box_shadow(value: str, settings: dict[str, Any]) -> None:
    shadow = parse_box_shadow(value)
    if shadow is None:
        raise MapperError("box-shadow", value)
    settings["_boxShadow"] = shadow


def map_border(value: str, settings: dict[str, Any]) -> None:
    parts = split_css_value(value)
    if not parts:
        raise MapperError("border", value)
    border = section(settings, "_border")
    for part in parts:
        lower = part.lower()
        if lower in _BORDER_STYLES:
            border["style"] = lower
        elif is_color(part) or to_hex(part):
            hex_value = to_hex(part)
            if hex_value:
                border["color"] = {"hex": hex_value}
        else:
            border["width"] = parse_value(part)


def map_border_width(value: str, settings: dict[str, Any]) -> None:
    section(settings, "_border")["width"] = expand_box(value)


def map_border_style(value: str, settings: dict[str, Any]) -> None:
    section(settings, "_border")["style"] = value


def map_border_color(value: str, settings: dict[str, Any]) -> None:
    hex_value = to_hex(value)
    if hex_value is None:
        raise MapperError("border-color", value)
    section(settings, "_border")["color"] = {"hex": hex_value}


def map_border_radius(value: str, settings: dict[str, Any]) -> None:
    """``border-radius`` with 1-4 corners; an elliptical ``/`` form is kept whole."""
    if "/" in value:
        section(settings, "_border")["radius"] = value.strip()
        return
    # top/right/bottom/left stand for the top-left, top-right, bottom-right
    # and bottom-left corners.
    section(settings, "_border")["radius"] = expand_box(value)


def _side_width(side: str):
    def mapper(value: str, settings: dict[str, Any]) -> None:
        section(section(settings, "_border"), side)["width"] = parse_value(value)

    mapper.__name__ = f"map_border_{side}_width"
    return mapper


BORDER_MAPPERS = {
    "box-shadow": map_box_shadow,
    "border": map_border,
    "border-width": map_border_width,
    "border-style": map_border_style,
    "border-color": map_border_color,
    "border-radius": map_border_radius,
    "border-top-width": _side_width("top"),
    "border-right-width": _side_width("right"),
    "border-bottom-width": _side_width("bottom"),
    "border-left-width": _side_width("left"),
}
