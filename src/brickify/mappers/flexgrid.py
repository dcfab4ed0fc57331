"""Flexbox and grid mapper tables.

Both families map ``gap``, ``align-items`` and friends to different keys;
the registry picks one table per declaration block from its ``display``.
"""

from __future__ import annotations

from typing import Any

from brickify.errors import MapperError
from brickify.mappers.values import parse_value, split_css_value


def _plain(*keys: str, numeric: bool = False):
    def mapper(value: str, settings: dict[str, Any]) -> None:
        for key in keys:
            settings[key] = parse_value(value) if numeric else value

    mapper.__name__ = "map" + keys[0]
    return mapper


def _float(key: str):
    def mapper(value: str, settings: dict[str, Any]) -> None:
        try:
            settings[key] = float(value)
        except ValueError as e:
            raise MapperError(key, value, cause=e) from e

    mapper.__name__ = "map" + key
    return mapper


def map_order(value: str, settings: dict[str, Any]) -> None:
    try:
        settings["_order"] = int(value)
    except ValueError as e:
        raise MapperError("order", value, cause=e) from e


# ---------------------------------------------------------------------------
# Flex
# ---------------------------------------------------------------------------


def map_flex_gap(value: str, settings: dict[str, Any]) -> None:
    parts = [parse_value(p) for p in split_css_value(value)]
    if not parts:
        raise MapperError("gap", value)
    settings["_rowGap"] = parts[0]
    settings["_columnGap"] = parts[1] if len(parts) > 1 else parts[0]


FLEX_MAPPERS = {
    "flex-direction": _plain("_flexDirection"),
    "flex-wrap": _plain("_flexWrap"),
    "justify-content": _plain("_justifyContent"),
    "align-items": _plain("_alignItems"),
    "align-content": _plain("_alignContent"),
    "flex-grow": _float("_flexGrow"),
    "flex-shrink": _float("_flexShrink"),
    "flex-basis": _plain("_flexBasis"),
    "align-self": _plain("_alignSelf"),
    "order": map_order,
    "gap": map_flex_gap,
    "row-gap": _plain("_rowGap", numeric=True),
    "column-gap": _plain("_columnGap", numeric=True),
}


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------


def _gap_parts(settings: dict[str, Any]) -> list[str]:
    current = settings.get("_gridGap")
    parts = split_css_value(str(current)) if current not in (None, "") else []
    while len(parts) < 2:
        parts.append(parts[0] if parts else "0")
    return parts


def map_grid_gap(value: str, settings: dict[str, Any]) -> None:
    parts = [str(parse_value(p)) for p in split_css_value(value)]
    if not parts:
        raise MapperError("gap", value)
    row = parts[0]
    column = parts[1] if len(parts) > 1 else row
    settings["_gridGap"] = f"{row} {column}"


def map_grid_row_gap(value: str, settings: dict[str, Any]) -> None:
    settings["_gridGap"] = f"{parse_value(value)} {_gap_parts(settings)[1]}"


def map_grid_column_gap(value: str, settings: dict[str, Any]) -> None:
    settings["_gridGap"] = f"{_gap_parts(settings)[0]} {parse_value(value)}"


GRID_MAPPERS = {
    "gap": map_grid_gap,
    "grid-gap": map_grid_gap,
    "row-gap": map_grid_row_gap,
    "grid-row-gap": map_grid_row_gap,
    "column-gap": map_grid_column_gap,
    "grid-column-gap": map_grid_column_gap,
    "grid-template-columns": _plain("_gridTemplateColumns"),
    "grid-template-rows": _plain("_gridTemplateRows"),
    "grid-template-areas": _plain("_gridTemplateAreas"),
    "grid-auto-columns": _plain("_gridAutoColumns"),
    "grid-auto-rows": _plain("_gridAutoRows"),
    "grid-auto-flow": _plain("_gridAutoFlow"),
    "grid-column": _plain("_gridItemColumnSpan"),
    "grid-row": _plain("_gridItemRowSpan"),
    "grid-area": _plain("_gridArea"),
    "justify-self": _plain("_gridItemJustifySelf"),
    "align-self": _plain("_gridItemAlignSelf"),
    "justify-items": _plain("_justifyItemsGrid", "_justifyItems"),
    "align-items": _plain("_alignItems", "_alignItemsGrid"),
    "justify-content": _plain("_justifyContent", "_justifyContentGrid"),
    "align-content": _plain("_alignContent", "_alignContentGrid"),
    "order": map_order,
}
