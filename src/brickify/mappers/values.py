"""Value helpers shared by every mapper table."""

from __future__ import annotations

import re
from typing import Any

from brickify.stylesheet.parser import split_top_level

_NUMBER_RE = re.compile(r"^(-?\d*\.?\d+)([a-z%]*)$", re.IGNORECASE)
_VAR_RE = re.compile(
    r"var\(\s*(--[\w-]+)\s*(?:,\s*((?:[^()]|\([^()]*\))*))?\)"
)
_HEX_RE = re.compile(r"^#[0-9a-f]{3,8}$", re.IGNORECASE)

MAX_VARIABLE_ROUNDS = 10

NAMED_COLORS: dict[str, str] = {
    "black": "#000000",
    "white": "#ffffff",
    "gray": "#808080",
    "grey": "#808080",
    "lightgray": "#d3d3d3",
    "darkgray": "#a9a9a9",
    "red": "#ff0000",
    "darkred": "#8b0000",
    "blue": "#0000ff",
    "navy": "#000080",
    "skyblue": "#87ceeb",
    "powderblue": "#b0e0e6",
    "dodgerblue": "#1e90ff",
    "royalblue": "#4169e1",
    "lightblue": "#add8e6",
    "green": "#008000",
    "lime": "#00ff00",
    "limegreen": "#32cd32",
    "seagreen": "#2e8b57",
    "lightgreen": "#90ee90",
    "teal": "#008080",
    "aqua": "#00ffff",
    "cyan": "#00ffff",
    "yellow": "#ffff00",
    "orange": "#ffa500",
    "orangered": "#ff4500",
    "gold": "#ffd700",
    "pink": "#ffc0cb",
    "hotpink": "#ff69b4",
    "lightpink": "#ffb6c1",
    "purple": "#800080",
    "violet": "#ee82ee",
    "magenta": "#ff00ff",
    "silver": "#c0c0c0",
    "whitesmoke": "#f5f5f5",
}

# Names recognised as colours when classifying shorthand tokens.
_SHORTHAND_COLOR_NAMES = {"red", "green", "blue", "white", "black", "yellow", "purple", "orange"}


def parse_value(value: Any) -> Any:
    """Strip ``px`` to a bare number; everything else passes through.

    ``"32px"`` -> ``32``, ``"1.5px"`` -> ``1.5``, ``"2rem"``, ``"50%"``,
    ``"calc(...)"`` and ``"var(--x)"`` are returned unchanged.
    """
    if not isinstance(value, str):
        return value
    text = value.strip()
    if "(" in text:
        return text
    match = _NUMBER_RE.match(text)
    if match and match.group(2).lower() == "px":
        number = float(match.group(1))
        return int(number) if number.is_integer() else number
    return text


def split_css_value(value: str) -> list[str]:
    """Split on whitespace outside parentheses and quotes."""
    if not value:
        return []
    return split_top_level(value, " ")


def resolve_variables(value: str, variables: dict[str, str] | None) -> str:
    """Substitute ``var(--name[, fallback])`` references.

    Unknown names fall back to the fallback text when present and are
    otherwise left in place. Resolution stops after
    ``MAX_VARIABLE_ROUNDS`` so circular definitions terminate.
    """
    if not variables and "var(" not in value:
        return value
    variables = variables or {}

    def substitute(match: re.Match[str]) -> str:
        name, fallback = match.group(1), match.group(2)
        if name in variables:
            return variables[name]
        if fallback is not None:
            return fallback.strip()
        return match.group(0)

    current = value
    for _ in range(MAX_VARIABLE_ROUNDS):
        resolved = _VAR_RE.sub(substitute, current)
        if resolved == current:
            break
        current = resolved
    return current


def color_value(value: str) -> dict[str, str] | None:
    """Colour object that keeps the authored form (name, var, rgb, hex)."""
    if not value:
        return None
    return {"raw": value}


def to_hex(value: str | None) -> str | None:
    """Normalise a colour for ``{hex: ...}`` slots.

    rgb()/rgba() pass through, 3- and 6-digit hex pass through, known names
    are converted, anything else yields None.
    """
    if not value:
        return None
    text = value.strip()
    if text.startswith("rgb"):
        return text
    if text.startswith("#"):
        return text if len(text) in (4, 7) else None
    return NAMED_COLORS.get(text.lower())


def is_color(value: str) -> bool:
    """Whether a shorthand token is a colour."""
    lower = value.lower()
    if lower in ("transparent", "currentcolor"):
        return True
    if lower.startswith("#"):
        return bool(_HEX_RE.match(lower))
    if lower.startswith(("rgb", "hsl")):
        return True
    return lower in _SHORTHAND_COLOR_NAMES


def alpha_hex_twins(hex_color: str) -> tuple[str, str] | None:
    """rgba()/hsla() equivalents for a 4- or 8-digit hex colour."""
    digits = hex_color.lstrip("#")
    if len(digits) == 4:
        digits = "".join(ch * 2 for ch in digits)
    elif len(digits) != 8:
        return None
    r, g, b, a = (int(digits[i : i + 2], 16) for i in range(0, 8, 2))
    alpha = round(a / 255, 3)
    alpha_text = f"{alpha:g}"
    lightness = round((r + g + b) / 3 / 255 * 100)
    return (
        f"rgba({r}, {g}, {b}, {alpha_text})",
        f"hsla(0, 0%, {lightness}%, {alpha_text})",
    )


def expand_box(value: str) -> dict[str, Any]:
    """Expand a 1-4 value box shorthand into top/right/bottom/left."""
    parts = [parse_value(p) for p in split_css_value(value)]
    if not parts:
        raise ValueError("empty box value")
    top = parts[0]
    right = parts[1] if len(parts) > 1 else top
    bottom = parts[2] if len(parts) > 2 else top
    left = parts[3] if len(parts) > 3 else right
    return {"top": top, "right": right, "bottom": bottom, "left": left}


def section(settings: dict[str, Any], key: str) -> dict[str, Any]:
    """Return ``settings[key]`` as a dict, creating or replacing it if needed."""
    current = settings.get(key)
    if not isinstance(current, dict):
        current = {}
        settings[key] = current
    return current


def class_selector(name: str) -> str:
    """``.name`` with literal dots in the class name escaped."""
    return "." + name.replace(".", "\\.")
