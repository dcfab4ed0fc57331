"""Stylesheet model: Declaration, StyleRule, Keyframes and StyleDeclarationMap."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair from a rule body."""

    property: str
    value: str
    important: bool = False

    def __str__(self) -> str:
        suffix = " !important" if self.important else ""
        return f"{self.property}: {self.value}{suffix}"


@dataclass(frozen=True)
class StyleRule:
    """One selector paired with the declarations of its block.

    A comma-separated selector list produces one StyleRule per selector,
    all sharing the same declarations and source order.
    """

    selector: str
    declarations: tuple[Declaration, ...]
    order: int  # position of the block in the source; later wins on ties

    def properties(self) -> dict[str, str]:
        """Declarations as a dict; a later duplicate property wins."""
        return {d.property: d.value for d in self.declarations}


@dataclass(frozen=True)
class Keyframes:
    """An ``@keyframes`` block kept as literal CSS text."""

    name: str
    rule: str


@dataclass(frozen=True)
class StyleDeclarationMap:
    """Everything extracted from a stylesheet, built once per conversion."""

    rules: tuple[StyleRule, ...] = ()
    variables: dict[str, str] = field(default_factory=dict)
    root_styles: str = ""
    keyframes: tuple[Keyframes, ...] = ()
    media_queries: tuple[str, ...] = ()

    def selectors(self) -> list[str]:
        """Distinct selectors in first-seen order."""
        seen: dict[str, None] = {}
        for rule in self.rules:
            seen.setdefault(rule.selector, None)
        return list(seen)

    def declarations_for(self, selector: str) -> dict[str, str]:
        """Merged declarations for every block that uses *selector*."""
        merged: dict[str, str] = {}
        for rule in self.rules:
            if rule.selector == selector:
                merged.update(rule.properties())
        return merged

    @property
    def is_empty(self) -> bool:
        return not (self.rules or self.root_styles or self.keyframes or self.media_queries)
