"""Mapper registry: routes CSS declarations to structured builder settings.

Declarations with no mapper, or whose mapper rejects the value, are kept
verbatim in ``settings["_cssCustom"]`` so no authored style is lost.
"""

from __future__ import annotations

import copy
import logging
import re
from typing import Any, Callable, Iterable, Mapping

from brickify.errors import MapperError
from brickify.mappers.background import background_mappers
from brickify.mappers.border import BORDER_MAPPERS
from brickify.mappers.effects import FILTER_MAPPERS, TRANSFORM_MAPPERS, TRANSITION_MAPPERS
from brickify.mappers.flexgrid import FLEX_MAPPERS, GRID_MAPPERS
from brickify.mappers.layout import (
    DISPLAY_MAPPERS,
    MISC_MAPPERS,
    POSITION_MAPPERS,
    SCROLL_MAPPERS,
    SIZING_MAPPERS,
    SPACING_MAPPERS,
)
from brickify.mappers.typography import TYPOGRAPHY_MAPPERS
from brickify.mappers.values import resolve_variables

log = logging.getLogger(__name__)

Mapper = Callable[[str, dict], None]
MapperTable = dict[str, Mapper]

# Browser-level properties the builder applies itself; never re-emitted.
NATIVE_PROPERTIES = frozenset({
    "box-sizing",
    "-webkit-font-smoothing",
    "-moz-osx-font-smoothing",
    "-webkit-tap-highlight-color",
    "text-rendering",
})

GRID_DISPLAYS = ("grid", "inline-grid")

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def kebab_case(name: str) -> str:
    """``fontSize`` -> ``font-size``; kebab and custom properties pass through."""
    if name.startswith("--") or "-" in name:
        return name
    return _CAMEL_RE.sub("-", name).lower()


def custom_css_block(selector: str | None, declarations: Iterable[tuple[str, str]]) -> str:
    body = "\n".join(f"  {prop}: {value};" for prop, value in declarations)
    return f"{selector or '%root%'} {{\n{body}\n}}"


def append_custom_css(settings: dict[str, Any], text: str, *, prepend: bool = False) -> None:
    """Add *text* to ``_cssCustom`` once; existing text is never replaced."""
    text = text.strip("\n")
    if not text:
        return
    existing = settings.get("_cssCustom", "")
    if text in existing:
        return
    if not existing:
        settings["_cssCustom"] = text
    elif prepend:
        settings["_cssCustom"] = f"{text}\n{existing}"
    else:
        settings["_cssCustom"] = f"{existing}\n{text}"


class MapperRegistry:
    """Category mapper tables merged into one lookup per layout family.

    The flex and grid families share most property names; each block of
    declarations is mapped with the table chosen by its ``display``.
    """

    def __init__(
        self,
        id_factory: Callable[[], str],
        tables: Iterable[MapperTable] | None = None,
    ) -> None:
        if tables is None:
            tables = (
                SIZING_MAPPERS,
                SPACING_MAPPERS,
                POSITION_MAPPERS,
                DISPLAY_MAPPERS,
                TYPOGRAPHY_MAPPERS,
                background_mappers(id_factory),
                BORDER_MAPPERS,
                TRANSFORM_MAPPERS,
                FILTER_MAPPERS,
                TRANSITION_MAPPERS,
                MISC_MAPPERS,
                SCROLL_MAPPERS,
            )
        self._base: MapperTable = {}
        for table in tables:
            self._base.update(table)
        self._flex: MapperTable = {**self._base, **GRID_MAPPERS, **FLEX_MAPPERS}
        self._grid: MapperTable = {**self._base, **FLEX_MAPPERS, **GRID_MAPPERS}

    def register(self, prop: str, mapper: Mapper) -> None:
        """Add or replace the mapper for *prop* in every family."""
        for table in (self._base, self._flex, self._grid):
            table[prop] = mapper

    def table_for(self, display: str | None) -> MapperTable:
        if display and display.strip().lower() in GRID_DISPLAYS:
            return self._grid
        return self._flex

    def resolve(self, prop: str, table: MapperTable | None = None) -> Mapper | None:
        table = table if table is not None else self._flex
        return table.get(prop) or table.get(kebab_case(prop))

    def has_mapper(self, prop: str) -> bool:
        return self.resolve(prop) is not None

    def apply(
        self,
        declarations: Mapping[str, str],
        settings: dict[str, Any] | None = None,
        *,
        selector: str | None = None,
        variables: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        """Map *declarations* onto *settings* and return it.

        Unmapped declarations are emitted as a ``selector { ... }`` block in
        ``_cssCustom``; ``%root%`` stands in when there is no selector.
        """
        if settings is None:
            settings = {}
        variables = dict(variables or {})

        display = declarations.get("display") or settings.get("_display")
        if display:
            display = resolve_variables(display, variables)
        table = self.table_for(display)

        leftovers: list[tuple[str, str]] = []
        for prop, raw in declarations.items():
            name = kebab_case(prop)
            if name in NATIVE_PROPERTIES:
                continue
            mapper = None if name.startswith("--") else self.resolve(name, table)
            if mapper is None:
                log.debug("No mapper for %s; keeping as custom CSS", name)
                leftovers.append((name, raw))
                continue
            value = resolve_variables(raw, variables)
            # Shorthands write several keys; commit only when the whole value maps.
            staged = copy.deepcopy(settings)
            try:
                mapper(value, staged)
            except MapperError as e:
                log.debug("%s; keeping as custom CSS", e)
                leftovers.append((name, raw))
            except Exception as e:  # noqa: BLE001 - a failing mapper falls back to custom CSS
                log.warning("%s", MapperError(name, value, cause=e))
                leftovers.append((name, raw))
            else:
                settings.clear()
                settings.update(staged)

        if leftovers:
            append_custom_css(settings, custom_css_block(selector, leftovers))
        return settings
