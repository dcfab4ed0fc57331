"""CSS stylesheet compilation: parse_stylesheet and the declaration map model."""

from brickify.stylesheet.model import Declaration, Keyframes, StyleDeclarationMap, StyleRule
from brickify.stylesheet.parser import (
    parse_declarations,
    parse_stylesheet,
    split_top_level,
    strip_comments,
)

__all__ = [
    "Declaration",
    "Keyframes",
    "StyleDeclarationMap",
    "StyleRule",
    "parse_declarations",
    "parse_stylesheet",
    "split_top_level",
    "strip_comments",
]
