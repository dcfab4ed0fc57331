"""CSS property mappers and the registry that applies them."""

from brickify.mappers.registry import (
    NATIVE_PROPERTIES,
    Mapper,
    MapperRegistry,
    MapperTable,
    append_custom_css,
    custom_css_block,
)
from brickify.mappers.values import (
    class_selector,
    is_color,
    parse_value,
    resolve_variables,
    split_css_value,
    to_hex,
)

__all__ = [
    "NATIVE_PROPERTIES",
    "Mapper",
    "MapperRegistry",
    "MapperTable",
    "append_custom_css",
    "class_selector",
    "custom_css_block",
    "is_color",
    "parse_value",
    "resolve_variables",
    "split_css_value",
    "to_hex",
]
