"""Cascade resolution: which stylesheet rules apply to a DOM element.

Rules are applied in (specificity, source order) ascending so that later,
more specific rules override earlier ones. ``!important`` declarations are
tracked per property and only yield to other important declarations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import soupsieve
from bs4 import Tag

from brickify.cascade.selectors import (
    SelectorKind,
    class_names,
    classify_selector,
    pseudo_state,
    specificity,
)
from brickify.errors import SelectorError
from brickify.stylesheet.model import Declaration, StyleDeclarationMap, StyleRule

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectorDeclarations:
    """A matched selector kept intact together with its declarations."""

    selector: str
    declarations: dict[str, str]


@dataclass
class PerClassMatch:
    properties_by_class: dict[str, dict[str, str]] = field(default_factory=dict)
    common_properties: dict[str, str] = field(default_factory=dict)
    pseudo_selectors: list[SelectorDeclarations] = field(default_factory=list)
    complex_selectors: list[SelectorDeclarations] = field(default_factory=list)


@dataclass
class MergedMatch:
    properties: dict[str, str] = field(default_factory=dict)
    pseudo_selectors: list[SelectorDeclarations] = field(default_factory=list)


class _Cascade:
    """Accumulates declarations for one target, honouring ``!important``."""

    def __init__(self, into: dict[str, str]) -> None:
        self.values = into
        self._important: set[str] = set()

    def apply(self, declarations: tuple[Declaration, ...]) -> None:
        for decl in declarations:
            if decl.property in self._important and not decl.important:
                continue
            self.values[decl.property] = decl.value
            if decl.important:
                self._important.add(decl.property)


class SelectorMatcher:
    """Match elements against the rules of one StyleDeclarationMap.

    Compiled selectors are cached for the lifetime of the matcher, which is
    one conversion run.
    """

    def __init__(self, style_map: StyleDeclarationMap) -> None:
        self.style_map = style_map
        self._compiled: dict[str, soupsieve.SoupSieve | None] = {}
        # :root blocks are carried through verbatim by the assembler.
        self._ordered: list[StyleRule] = sorted(
            (r for r in style_map.rules if r.selector != ":root"),
            key=lambda r: (specificity(r.selector), r.order),
        )

    def compile(self, selector: str) -> soupsieve.SoupSieve:
        """Compile *selector*, raising SelectorError when it is not valid."""
        try:
            return soupsieve.compile(selector)
        except (soupsieve.SelectorSyntaxError, ValueError, TypeError) as e:
            raise SelectorError(selector, cause=e) from e

    def _get_compiled(self, selector: str) -> soupsieve.SoupSieve | None:
        if selector not in self._compiled:
            try:
                self._compiled[selector] = self.compile(selector)
            except SelectorError as e:
                log.warning("%s; treating as non-matching", e)
                self._compiled[selector] = None
        return self._compiled[selector]

    def matches(self, element: Tag | None, selector: str) -> bool:
        """True when *element* matches *selector*.

        Invalid selectors and selectors that fail during evaluation count as
        non-matching and are logged.
        """
        if element is None or not selector or not selector.strip():
            return False
        compiled = self._get_compiled(selector.strip())
        if compiled is None:
            return False
        try:
            return bool(compiled.match(element))
        except Exception as e:  # noqa: BLE001 - one bad selector must not abort the run
            log.warning("Selector %r failed on <%s>: %s", selector, element.name, e)
            return False

    def _matches_base(self, element: Tag, selector: str) -> bool:
        split = pseudo_state(selector)
        if split is None:
            return self.matches(element, selector)
        return self.matches(element, split[0])

    # ------------------------------------------------------------------
    # Resolution modes
    # ------------------------------------------------------------------

    def match_per_class(self, element: Tag, classes: list[str]) -> PerClassMatch:
        """Split matching declarations by the element's classes.

        Each class receives declarations from selectors that are exactly that
        class or a class-only compound naming it. Tag and id selectors, and
        compounds with a tag or id part such as ``p.lead``, land in
        ``common_properties``.
        Pseudo and complex selectors are returned whole.
        """
        result = PerClassMatch(properties_by_class={c: {} for c in classes})
        per_class = {c: _Cascade(result.properties_by_class[c]) for c in classes}
        common = _Cascade(result.common_properties)

        for rule in self._ordered:
            kind = classify_selector(rule.selector)
            if kind is SelectorKind.PSEUDO:
                if self._matches_base(element, rule.selector):
                    result.pseudo_selectors.append(
                        SelectorDeclarations(rule.selector, rule.properties())
                    )
                continue
            if not self.matches(element, rule.selector):
                continue
            if kind is SelectorKind.COMPLEX:
                result.complex_selectors.append(
                    SelectorDeclarations(rule.selector, rule.properties())
                )
                continue
            names = class_names(rule.selector)
            if not names or kind is SelectorKind.COMPOUND:
                common.apply(rule.declarations)
                continue
            for name in names:
                if name in per_class:
                    per_class[name].apply(rule.declarations)
        return result

    def match_merged(self, element: Tag) -> MergedMatch:
        """Merge every matching non-pseudo rule into one declaration set."""
        result = MergedMatch()
        cascade = _Cascade(result.properties)
        for rule in self._ordered:
            if classify_selector(rule.selector) is SelectorKind.PSEUDO:
                if self._matches_base(element, rule.selector):
                    result.pseudo_selectors.append(
                        SelectorDeclarations(rule.selector, rule.properties())
                    )
                continue
            if self.matches(element, rule.selector):
                cascade.apply(rule.declarations)
        return result
