"""Sizing, spacing, position, display and miscellaneous layout mappers."""

from __future__ import annotations

from typing import Any

from brickify.errors import MapperError
from brickify.mappers.values import expand_box, parse_value, section

LAYOUT_DISPLAYS = ("flex", "inline-flex", "grid", "inline-grid")


def _setting(key: str, *, numeric: bool = True):
    def mapper(value: str, settings: dict[str, Any]) -> None:
        settings[key] = parse_value(value) if numeric else value

    mapper.__name__ = f"map{key}"
    return mapper


def _box(key: str):
    def mapper(value: str, settings: dict[str, Any]) -> None:
        settings[key] = expand_box(value)

    mapper.__name__ = f"map{key}"
    return mapper


def _box_side(key: str, side: str):
    def mapper(value: str, settings: dict[str, Any]) -> None:
        section(settings, key)[side] = parse_value(value)

    mapper.__name__ = f"map{key}_{side}"
    return mapper


SIZING_MAPPERS = {
    "width": _setting("_width"),
    "height": _setting("_height"),
    "min-width": _setting("_widthMin"),
    "max-width": _setting("_widthMax"),
    "min-height": _setting("_heightMin"),
    "max-height": _setting("_heightMax"),
    "aspect-ratio": _setting("_aspectRatio", numeric=False),
}

SPACING_MAPPERS = {"margin": _box("_margin"), "padding": _box("_padding")}
for _key, _prop in (("_margin", "margin"), ("_padding", "padding")):
    for _side in ("top", "right", "bottom", "left"):
        SPACING_MAPPERS[f"{_prop}-{_side}"] = _box_side(_key, _side)


def map_position(value: str, settings: dict[str, Any]) -> None:
    section(settings, "_position")["type"] = value


def _offset(side: str):
    def mapper(value: str, settings: dict[str, Any]) -> None:
        section(settings, "_position")[side] = parse_value(value)

    mapper.__name__ = f"map_{side}"
    return mapper


def map_z_index(value: str, settings: dict[str, Any]) -> None:
    try:
        section(settings, "_position")["zIndex"] = int(value)
    except ValueError as e:
        raise MapperError("z-index", value, cause=e) from e


POSITION_MAPPERS = {
    "position": map_position,
    "top": _offset("top"),
    "right": _offset("right"),
    "bottom": _offset("bottom"),
    "left": _offset("left"),
    "z-index": map_z_index,
}


def map_display(value: str, settings: dict[str, Any]) -> None:
    """Only flex and grid displays have builder controls."""
    display = value.strip().lower()
    if display not in LAYOUT_DISPLAYS:
        raise MapperError("display", value)
    settings["_display"] = display


DISPLAY_MAPPERS = {"display": map_display}


def map_opacity(value: str, settings: dict[str, Any]) -> None:
    try:
        opacity = float(value)
    except ValueError as e:
        raise MapperError("opacity", value, cause=e) from e
    settings["_opacity"] = f"{min(1.0, max(0.0, opacity)):g}"


MISC_MAPPERS = {
    "opacity": map_opacity,
    "cursor": _setting("_cursor", numeric=False),
    "pointer-events": _setting("_pointerEvents", numeric=False),
    "mix-blend-mode": _setting("_mixBlendMode", numeric=False),
    "isolation": _setting("_isolation", numeric=False),
    "overflow": _setting("_overflow", numeric=False),
    "overflow-x": _setting("_overflowX", numeric=False),
    "overflow-y": _setting("_overflowY", numeric=False),
    "visibility": _setting("_visibility", numeric=False),
}

SCROLL_MAPPERS = {
    "scroll-snap-type": _setting("_scrollSnapType", numeric=False),
    "scroll-snap-align": _setting("_scrollSnapAlign", numeric=False),
    "scroll-snap-stop": _setting("_scrollSnapStop", numeric=False),
    "scroll-behavior": _setting("_scrollBehavior", numeric=False),
}
