"""Selector classification and specificity scoring."""

from __future__ import annotations

import re
from enum import Enum

# Pseudo-classes that map onto structured "<key>:<state>" settings.
PSEUDO_STATES = ("hover", "focus", "active", "visited", "disabled")

_NAME = r"(?:[\w-]|\\.)+"

_STATE_RE = re.compile(r":(" + "|".join(PSEUDO_STATES) + r")$")
_PSEUDO_ELEMENT_RE = re.compile(r"::[\w-]+(?:\([^)]*\))?")
_LEGACY_ELEMENT_RE = re.compile(r"(?<!:):(?:before|after|first-line|first-letter)\b")
_ATTR_RE = re.compile(r"\[[^\]]*\]")
_ID_RE = re.compile(r"#" + _NAME)
_CLASS_RE = re.compile(r"\.(" + _NAME + r")")
_PSEUDO_CLASS_RE = re.compile(r":[\w-]+")
_TYPE_RE = re.compile(r"(?:^|[\s>+~(,])([a-zA-Z][\w-]*)")
_FUNC_RE = re.compile(r":([\w-]+)\(")
_COMBINATOR_RE = re.compile(r"[\s>+~\[]")

_SIMPLE_RE = re.compile(r"^(?:[.#]?" + _NAME + r"|\*)$")
_COMPOUND_CLASS_RE = re.compile(r"^(?:\." + _NAME + r"){2,}$")
_COMPOUND_RE = re.compile(r"^(?:[a-zA-Z][\w-]*|\*)?(?:[.#]" + _NAME + r")+$")

# Functional pseudo-classes whose argument carries the specificity.
_TRANSPARENT_FUNCS = {"not", "is", "has", "matches"}


class SelectorKind(Enum):
    """Structural category of a single selector."""

    SIMPLE = "simple"  # .a, #a, a, *
    COMPOUND_CLASS = "compound-class"  # .a.b
    COMPOUND = "compound"  # p.a, div#x.y
    PSEUDO = "pseudo"  # .a:hover, a::before
    COMPLEX = "complex"  # .a .b, .a > .b, a + b, [x], p:first-child


def classify_selector(selector: str) -> SelectorKind:
    sel = selector.strip()
    if "::" in sel or _STATE_RE.search(sel) or _LEGACY_ELEMENT_RE.search(sel):
        return SelectorKind.PSEUDO
    if _SIMPLE_RE.match(sel):
        return SelectorKind.SIMPLE
    if _COMPOUND_CLASS_RE.match(sel):
        return SelectorKind.COMPOUND_CLASS
    if _COMPOUND_RE.match(sel):
        return SelectorKind.COMPOUND
    return SelectorKind.COMPLEX


def has_combinator(selector: str) -> bool:
    """True when *selector* has a descendant, child, sibling or attribute part."""
    return bool(_COMBINATOR_RE.search(selector.strip()))


def class_names(selector: str) -> list[str]:
    """Class names appearing anywhere in *selector*, unescaped, in order."""
    return [m.group(1).replace("\\", "") for m in _CLASS_RE.finditer(selector)]


def pseudo_state(selector: str) -> tuple[str, str] | None:
    """Split ``base:state`` or ``base::element`` into its two halves.

    Returns None for selectors without a trailing pseudo part. An empty
    base (``:hover`` alone) becomes ``*``.
    """
    sel = selector.strip()
    match = _STATE_RE.search(sel)
    if match:
        base = sel[: match.start()].strip()
        return (base or "*", match.group(1))
    match = _PSEUDO_ELEMENT_RE.search(sel) or _LEGACY_ELEMENT_RE.search(sel)
    if match:
        base = (sel[: match.start()] + sel[match.end():]).strip()
        return (base or "*", match.group(0).lstrip(":"))
    return None


def _drop_call(text: str, start: int, keep_args: bool) -> str:
    """Remove a ``:name(...)`` call beginning at *start*."""
    open_at = text.index("(", start)
    depth = 0
    for i in range(open_at, len(text)):
        if text[i] == "(":
            depth += 1
        elif text[i] == ")":
            depth -= 1
            if depth == 0:
                inner = text[open_at + 1 : i]
                replacement = f"({inner})" if keep_args else ""
                return text[:start] + replacement + text[i + 1 :]
    return text[:start]


def specificity(selector: str) -> int:
    """Score a selector: 100 per id, 10 per class/attribute/pseudo-class, 1 per type.

    Pseudo-elements count as types. ``:where()`` contributes nothing and
    ``:not()``/``:is()``/``:has()`` contribute their argument.
    """
    text = selector.strip()
    score = 0

    score += 10 * len(_ATTR_RE.findall(text))
    text = _ATTR_RE.sub("", text)

    elements = _PSEUDO_ELEMENT_RE.findall(text) + _LEGACY_ELEMENT_RE.findall(text)
    score += len(elements)
    text = _PSEUDO_ELEMENT_RE.sub("", text)
    text = _LEGACY_ELEMENT_RE.sub("", text)

    match = _FUNC_RE.search(text)
    while match:
        name = match.group(1).lower()
        if name in _TRANSPARENT_FUNCS:
            text = _drop_call(text, match.start(), keep_args=True)
        else:
            if name != "where":
                score += 10
            text = _drop_call(text, match.start(), keep_args=False)
        match = _FUNC_RE.search(text)

    score += 100 * len(_ID_RE.findall(text))
    text = _ID_RE.sub("", text)
    score += 10 * len(_CLASS_RE.findall(text))
    text = _CLASS_RE.sub("", text)
    score += 10 * len(_PSEUDO_CLASS_RE.findall(text))
    text = _PSEUDO_CLASS_RE.sub("", text)
    score += len(_TYPE_RE.findall(text))
    return score
