"""Typography mappers: everything that lands in ``_typography``."""

from __future__ import annotations

import re
from typing import Any

from brickify.errors import MapperError
from brickify.mappers.values import color_value, parse_value, section, split_css_value

_FONT_WEIGHTS = {
    "thin": 100, "hairline": 100,
    "extralight": 200, "ultralight": 200,
    "light": 300, "lighter": 300,
    "normal": 400, "regular": 400,
    "medium": 500,
    "semibold": 600, "demibold": 600,
    "bold": 700, "bolder": 700,
    "extrabold": 800, "ultrabold": 800,
    "black": 900, "heavy": 900,
}


def _typography(settings: dict[str, Any]) -> dict[str, Any]:
    return section(settings, "_typography")


def _passthrough(key: str):
    def mapper(value: str, settings: dict[str, Any]) -> None:
        _typography(settings)[key] = value

    mapper.__name__ = f"map_{key.replace('-', '_')}"
    return mapper


def _numeric(key: str):
    def mapper(value: str, settings: dict[str, Any]) -> None:
        _typography(settings)[key] = parse_value(value)

    mapper.__name__ = f"map_{key.replace('-', '_')}"
    return mapper


def map_color(value: str, settings: dict[str, Any]) -> None:
    color = color_value(value)
    if color:
        _typography(settings)["color"] = color


def font_weight(value: str) -> int:
    """Numeric font weight in 100..900 steps; unknown keywords become 400."""
    keyword = re.sub(r"[^a-z0-9]", "", value.strip().lower())
    try:
        numeric = int(float(keyword))
    except (ValueError, OverflowError):
        numeric = 0
    if not 100 <= numeric <= 900:
        numeric = _FONT_WEIGHTS.get(keyword, 400)
    return max(100, min(900, int(numeric / 100.0 + 0.5) * 100))


def map_font_weight(value: str, settings: dict[str, Any]) -> None:
    _typography(settings)["font-weight"] = font_weight(value)


def map_font_family(value: str, settings: dict[str, Any]) -> None:
    _typography(settings)["font-family"] = value.replace('"', "").replace("'", "")


def map_text_shadow(value: str, settings: dict[str, Any]) -> None:
    parts = split_css_value(value)
    if len(parts) < 3:
        raise MapperError("text-shadow", value)
    shadow = section(_typography(settings), "textShadow")
    values: dict[str, Any] = {
        "offsetX": parse_value(parts[0]),
        "offsetY": parse_value(parts[1]),
        "blur": parse_value(parts[2]),
    }
    if len(parts) > 3:
        values["color"] = color_value(parts[3])
    shadow["values"] = values


TYPOGRAPHY_MAPPERS = {
    "color": map_color,
    "font-size": _numeric("font-size"),
    "font-weight": map_font_weight,
    "font-style": _passthrough("font-style"),
    "font-family": map_font_family,
    "line-height": _numeric("line-height"),
    "letter-spacing": _numeric("letter-spacing"),
    "text-align": _passthrough("text-align"),
    "text-transform": _passthrough("text-transform"),
    "text-decoration": _passthrough("text-decoration"),
    "white-space": _passthrough("white-space"),
    "text-wrap": _passthrough("text-wrap"),
    "text-shadow": map_text_shadow,
}
