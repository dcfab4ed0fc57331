"""Background and gradient mappers.

Gradient colour stops carry ids, so the table is built per run from an id
factory: ``background_mappers(ids)``.
"""

from __future__ import annotations

import re
from typing import Any, Callable

from brickify.errors import MapperError
from brickify.mappers.values import (
    alpha_hex_twins,
    is_color,
    section,
    split_css_value,
    to_hex,
)
from brickify.stylesheet.parser import split_top_level

_GRADIENT_RE = re.compile(r"(linear|radial|conic)-gradient\(", re.IGNORECASE)
_URL_RE = re.compile(r"url\(\s*['\"]?(.*?)['\"]?\s*\)")

DIRECTION_ANGLES = {
    "to top": "0",
    "to top right": "45",
    "to right top": "45",
    "to right": "90",
    "to bottom right": "135",
    "to right bottom": "135",
    "to bottom": "180",
    "to bottom left": "225",
    "to left bottom": "225",
    "to left": "270",
    "to top left": "315",
    "to left top": "315",
}

_REPEAT = {"repeat", "repeat-x", "repeat-y", "no-repeat", "space", "round"}
_ATTACHMENT = {"scroll", "fixed", "local"}
_BOX = {"border-box", "padding-box", "content-box"}
_POSITION_WORDS = ("center", "top", "bottom", "left", "right")


def _call_body(text: str, open_at: int) -> str:
    """Text between the parenthesis at *open_at* and its partner."""
    depth = 0
    for i in range(open_at, len(text)):
        if text[i] == "(":
            depth += 1
        elif text[i] == ")":
            depth -= 1
            if depth == 0:
                return text[open_at + 1 : i]
    return text[open_at + 1 :]


def _is_position(part: str) -> bool:
    try:
        float(part.replace("%", ""))
    except ValueError:
        return False
    return True


def parse_color_stop(stop: str, ids: Callable[[], str]) -> dict[str, Any] | None:
    parts = split_css_value(stop)
    color = next((p for p in parts if is_color(p)), None)
    if color is None:
        return None

    lower = color.lower()
    twins: tuple[str, str] | None = None
    if lower == "transparent":
        hex_value = "transparent"
        twins = ("rgba(255, 255, 255, 0)", "hsla(0, 0%, 100%, 0)")
    elif lower.startswith("#") and len(lower) in (5, 9):
        hex_value = color
        twins = alpha_hex_twins(color)
    elif lower.startswith("hsl"):
        hex_value = color
    else:
        hex_value = to_hex(color)
        if hex_value is None:
            return None

    entry: dict[str, Any] = {"id": ids(), "color": {"hex": hex_value}}
    if twins:
        entry["color"]["rgb"], entry["color"]["hsl"] = twins
    elif lower.startswith("rgba"):
        entry["color"]["rgb"] = color
    elif lower.startswith("hsla"):
        entry["color"]["hsl"] = color

    positions = [p for p in parts if p is not color and _is_position(p)]
    if positions:
        entry["stop"] = positions[-1].replace("%", "")
    return entry


def parse_gradient(value: str, ids: Callable[[], str]) -> dict[str, Any] | None:
    """Parse a ``*-gradient()`` value into the builder's gradient object."""
    match = _GRADIENT_RE.search(value)
    if not match:
        return None
    gradient_type = match.group(1).lower()
    args = split_top_level(_call_body(value, match.end() - 1), ",")
    result: dict[str, Any] = {"gradientType": gradient_type, "colors": []}

    if args and gradient_type == "linear":
        first = args[0].lower()
        if first.endswith("deg"):
            result["angle"] = first[:-3].strip()
            args = args[1:]
        elif first.startswith("to "):
            result["angle"] = DIRECTION_ANGLES.get(" ".join(first.split()), "180")
            args = args[1:]

    for stop in args:
        entry = parse_color_stop(stop, ids)
        if entry is not None:
            result["colors"].append(entry)
    return result if result["colors"] else None


def split_background(value: str) -> dict[str, str]:
    """Classify ``background`` shorthand tokens into longhand properties."""
    props: dict[str, str] = {}
    for token in split_css_value(value):
        lower = token.lower()
        if is_color(token):
            props["background-color"] = token
        elif "url(" in lower or "-gradient(" in lower:
            props["background-image"] = token
        elif lower in _REPEAT:
            props["background-repeat"] = token
        elif lower in _ATTACHMENT:
            props["background-attachment"] = token
        elif lower in _BOX:
            props["background-origin"] = token
            props["background-clip"] = token
        elif "/" in token:
            position, _, size = token.partition("/")
            if position.strip():
                props["background-position"] = position.strip()
            if size.strip():
                props["background-size"] = size.strip()
        elif any(word in lower for word in _POSITION_WORDS):
            existing = props.get("background-position")
            props["background-position"] = f"{existing} {token}" if existing else token
    return props


def background_mappers(ids: Callable[[], str]) -> dict[str, Callable[[str, dict], None]]:
    """Build the background table bound to a run's id factory."""

    def map_background(value: str, settings: dict[str, Any]) -> None:
        props = split_background(value)
        if not props:
            raise MapperError("background", value)
        for prop, part in props.items():
            table[prop](part, settings)

    def map_background_color(value: str, settings: dict[str, Any]) -> None:
        hex_value = to_hex(value)
        if hex_value is None:
            raise MapperError("background-color", value)
        section(settings, "_background")["color"] = {"hex": hex_value}

    def map_background_image(value: str, settings: dict[str, Any]) -> None:
        lower = value.lower()
        if "-gradient(" in lower:
            gradient = parse_gradient(value, ids)
            if gradient is None:
                raise MapperError("background-image", value)
            previous = settings.get("_gradient")
            if isinstance(previous, dict) and "applyTo" in previous:
                gradient["applyTo"] = previous["applyTo"]
            settings["_gradient"] = gradient
            background = settings.get("_background")
            if isinstance(background, dict):
                background.pop("image", None)
                if not background:
                    del settings["_background"]
            return
        match = _URL_RE.search(value)
        if not match:
            raise MapperError("background-image", value)
        section(settings, "_background")["image"] = {"url": match.group(1)}

    def map_background_clip(value: str, settings: dict[str, Any]) -> None:
        if value.strip().lower() == "text":
            gradient = settings.get("_gradient")
            if not isinstance(gradient, dict):
                raise MapperError("background-clip", value)
            gradient["applyTo"] = "text"
            return
        section(settings, "_background")["clip"] = value

    def _key(key: str):
        def mapper(value: str, settings: dict[str, Any]) -> None:
            section(settings, "_background")[key] = value

        return mapper

    table: dict[str, Callable[[str, dict], None]] = {
        "background": map_background,
        "background-color": map_background_color,
        "background-image": map_background_image,
        "background-repeat": _key("repeat"),
        "background-size": _key("size"),
        "background-position": _key("position"),
        "background-attachment": _key("attachment"),
        "background-blend-mode": _key("blendMode"),
        "background-origin": _key("origin"),
        "background-clip": map_background_clip,
        "-webkit-background-clip": map_background_clip,
    }
    return table
