"""Transform, filter and transition mappers."""

from __future__ import annotations

import re
from typing import Any

from brickify.errors import MapperError
from brickify.mappers.values import parse_value, section, split_css_value

_FUNCTION_RE = re.compile(r"([\w-]+)\(([^)]*)\)")
_ARG_SPLIT_RE = re.compile(r"[,\s]+")

FILTER_FUNCTIONS = (
    "blur", "brightness", "contrast", "grayscale", "hue-rotate",
    "invert", "saturate", "sepia",
)


def _args(text: str) -> list[str]:
    return [a for a in _ARG_SPLIT_RE.split(text.strip()) if a]


def map_transform(value: str, settings: dict[str, Any]) -> None:
    functions = _FUNCTION_RE.findall(value)
    if not functions:
        raise MapperError("transform", value)
    transform = section(settings, "_transform")

    for name, raw_args in functions:
        args = _args(raw_args)
        if name == "translate":
            x, y = (args + ["0", "0"])[:2]
            transform["translateX"] = parse_value(x)
            transform["translateY"] = parse_value(y)
        elif name in ("translateX", "translateY", "translateZ"):
            transform[name] = parse_value(raw_args.strip())
        elif name == "translate3d":
            x, y, z = (args + ["0", "0", "0"])[:3]
            transform["translateX"] = parse_value(x)
            transform["translateY"] = parse_value(y)
            transform["translateZ"] = parse_value(z)
        elif name == "scale":
            x = args[0] if args else "1"
            y = args[1] if len(args) > 1 else x
            scale = section(transform, "scale")
            scale["x"], scale["y"] = float(x), float(y)
        elif name in ("scaleX", "scaleY", "scaleZ"):
            section(transform, "scale")[name[-1].lower()] = float(raw_args)
        elif name == "scale3d":
            x, y, z = (args + ["1", "1", "1"])[:3]
            scale = section(transform, "scale")
            scale["x"], scale["y"], scale["z"] = float(x), float(y), float(z)
        elif name == "rotate":
            section(transform, "rotate")["z"] = raw_args.strip()
        elif name in ("rotateX", "rotateY", "rotateZ"):
            section(transform, "rotate")[name[-1].lower()] = raw_args.strip()
        elif name == "rotate3d":
            x, y, z, angle = (args + ["0", "0", "0", "0"])[:4]
            section(transform, "rotate").update({"x": x, "y": y, "z": z, "angle": angle})
        elif name == "skew":
            x, y = (args + ["0deg", "0deg"])[:2]
            section(transform, "skew").update({"x": x, "y": y})
        elif name in ("skewX", "skewY"):
            section(transform, "skew")[name[-1].lower()] = raw_args.strip()
        elif name == "perspective":
            transform["perspective"] = parse_value(raw_args.strip())
        elif name in ("matrix", "matrix3d"):
            transform["matrix"] = f"{name}({raw_args})"


def _transform_key(key: str):
    def mapper(value: str, settings: dict[str, Any]) -> None:
        section(settings, "_transform")[key] = value

    mapper.__name__ = f"map_transform_{key}"
    return mapper


TRANSFORM_MAPPERS = {
    "transform": map_transform,
    "transform-origin": _transform_key("origin"),
    "transform-style": _transform_key("style"),
    "perspective-origin": _transform_key("perspectiveOrigin"),
    "backface-visibility": _transform_key("backfaceVisibility"),
}


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------


def filter_number(value: str) -> str:
    """``"5px"`` -> ``"5"``; other units are kept."""
    parsed = parse_value(value)
    return f"{parsed:g}" if isinstance(parsed, (int, float)) else str(parsed)


def map_filter(value: str, settings: dict[str, Any]) -> None:
    """Split ``filter`` into per-function settings.

    Anything containing ``drop-shadow`` is left to custom CSS as a whole,
    since the builder has no control for it.
    """
    if "drop-shadow" in value:
        raise MapperError("filter", value)
    matched = [(n, a) for n, a in _FUNCTION_RE.findall(value) if n in FILTER_FUNCTIONS]
    if not matched:
        raise MapperError("filter", value)
    filters = section(settings, "_cssFilters")
    for name, arg in matched:
        filters[name] = filter_number(arg.strip())


FILTER_MAPPERS = {"filter": map_filter}


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

_TRANSITION_DEFAULTS = ("all", "0s", "ease", "0s")


def _transition_part(index: int):
    def mapper(value: str, settings: dict[str, Any]) -> None:
        parts = split_css_value(str(settings.get("_cssTransition", "")))
        merged = [
            parts[i] if i < len(parts) else default
            for i, default in enumerate(_TRANSITION_DEFAULTS)
        ]
        merged[index] = value.strip()
        settings["_cssTransition"] = " ".join(merged)

    mapper.__name__ = f"map_transition_part_{index}"
    return mapper


def map_transition(value: str, settings: dict[str, Any]) -> None:
    settings["_cssTransition"] = value.strip()


TRANSITION_MAPPERS = {
    "transition": map_transition,
    "transition-property": _transition_part(0),
    "transition-duration": _transition_part(1),
    "transition-timing-function": _transition_part(2),
    "transition-delay": _transition_part(3),
}
