"""brickify: convert HTML and CSS into site-builder clipboard JSON."""

__version__ = "0.1.0"

from brickify.config import ConvertOptions, SelectorTarget, StyleMode
from brickify.converter import convert
from brickify.errors import (
    BrickifyError,
    MapperError,
    OptionsError,
    SelectorError,
    StylesheetParseError,
)

__all__ = [
    "BrickifyError",
    "ConvertOptions",
    "MapperError",
    "OptionsError",
    "SelectorError",
    "SelectorTarget",
    "StyleMode",
    "StylesheetParseError",
    "__version__",
    "convert",
]
