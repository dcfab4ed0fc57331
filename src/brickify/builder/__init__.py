"""Element tree builder: DOM in, flat arena of builder elements out."""

from brickify.builder.context import TAG_LABELS, BuildContext
from brickify.builder.model import (
    ROOT_PARENT,
    Composite,
    Container,
    ElementArena,
    ElementNode,
    Leaf,
    ProcessorResult,
    Skip,
)
from brickify.builder.styling import ElementStyler
from brickify.builder.walker import TreeBuilder

__all__ = [
    "BuildContext",
    "Composite",
    "Container",
    "ElementArena",
    "ElementNode",
    "ElementStyler",
    "Leaf",
    "ProcessorResult",
    "ROOT_PARENT",
    "Skip",
    "TAG_LABELS",
    "TreeBuilder",
]
