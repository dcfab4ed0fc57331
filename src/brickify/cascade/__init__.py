"""Selector matching and cascade resolution."""

from brickify.cascade.matcher import (
    MergedMatch,
    PerClassMatch,
    SelectorDeclarations,
    SelectorMatcher,
)
from brickify.cascade.selectors import (
    PSEUDO_STATES,
    SelectorKind,
    class_names,
    classify_selector,
    pseudo_state,
    specificity,
)

__all__ = [
    "MergedMatch",
    "PerClassMatch",
    "PSEUDO_STATES",
    "SelectorDeclarations",
    "SelectorKind",
    "SelectorMatcher",
    "class_names",
    "classify_selector",
    "pseudo_state",
    "specificity",
]
