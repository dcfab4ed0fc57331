"""Lark-based parser that compiles CSS text into a StyleDeclarationMap.

The grammar only recognises block structure (rules, at-rules, strings and
comments). Rule preludes and bodies are sliced from the source using token
positions, then split into selectors and declarations here.

Example:
    :root { --brand: #ff0000; }
    .title, h1 { color: var(--brand); font-size: 32px; }
    @media (max-width: 600px) { .title { font-size: 20px; } }
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from brickify.errors import StylesheetParseError
from brickify.stylesheet.model import (
    Declaration,
    Keyframes,
    StyleDeclarationMap,
    StyleRule,
)

__all__ = ["parse_stylesheet", "parse_declarations", "split_top_level", "strip_comments"]

log = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)
_WS_RE = re.compile(r"\s+")

# At-rules whose block is copied through as opaque text.
_KEYFRAMES = {"@keyframes", "@-webkit-keyframes", "@-moz-keyframes"}

_parser: Lark | None = None


def _get_parser() -> Lark:
    global _parser
    if _parser is None:
        _parser = Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")
    return _parser


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------


def strip_comments(text: str) -> str:
    """Remove ``/* ... */`` comments that are not inside a string."""
    out: list[str] = []
    i = 0
    quote = ""
    while i < len(text):
        ch = text[i]
        if quote:
            out.append(ch)
            if ch == "\\" and i + 1 < len(text):
                out.append(text[i + 1])
                i += 2
                continue
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
            out.append(ch)
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            i = len(text) if end == -1 else end + 2
            continue
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def split_top_level(text: str, sep: str) -> list[str]:
    """Split *text* on *sep* outside quotes, parentheses and brackets.

    Empty pieces are dropped and the rest are stripped. With ``sep=" "``
    any run of whitespace separates.
    """
    parts: list[str] = []
    buf: list[str] = []
    depth = 0
    quote = ""
    for ch in text:
        if quote:
            buf.append(ch)
            if ch == quote:
                quote = ""
            continue
        if ch in "\"'":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth = max(0, depth - 1)
        elif depth == 0 and (ch == sep or (sep == " " and ch.isspace())):
            piece = "".join(buf).strip()
            if piece:
                parts.append(piece)
            buf = []
            continue
        buf.append(ch)
    piece = "".join(buf).strip()
    if piece:
        parts.append(piece)
    return parts


def parse_declarations(body: str) -> tuple[Declaration, ...]:
    """Parse a declaration block body (or a ``style=`` attribute)."""
    result: list[Declaration] = []
    for chunk in split_top_level(strip_comments(body), ";"):
        prop, sep, value = chunk.partition(":")
        if not sep:
            continue
        prop = prop.strip()
        value = value.strip()
        if not prop or not value:
            continue
        important = False
        match = _IMPORTANT_RE.search(value)
        if match:
            important = True
            value = value[: match.start()].rstrip()
        if not prop.startswith("--"):
            prop = prop.lower()
        result.append(Declaration(prop, value, important))
    return tuple(result)


def _normalize_selector(raw: str) -> str:
    return _WS_RE.sub(" ", raw).strip()


# ---------------------------------------------------------------------------
# Transformer
# ---------------------------------------------------------------------------


class _Sentinel:
    """Marker objects carrying source spans out of the parse tree."""


class _Span(_Sentinel):
    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end


class _Prelude(_Span):
    pass


class _Block(_Span):
    pass


class _Rule(_Sentinel):
    def __init__(self, prelude: _Prelude, block: _Block):
        self.prelude = prelude
        self.block = block


class _AtRule(_Sentinel):
    def __init__(self, keyword: str, start: int, prelude: _Prelude | None, block: _Block | None):
        self.keyword = keyword
        self.start = start
        self.prelude = prelude
        self.block = block


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform the Lark parse tree into span sentinels."""

    def prelude(self, items: list[Token]) -> _Prelude:
        return _Prelude(items[0].start_pos, items[-1].end_pos)

    def block(self, items: list[object]) -> _Block:
        lbrace = items[0]
        rbrace = items[-1]
        return _Block(lbrace.start_pos, rbrace.end_pos)  # type: ignore[union-attr]

    def rule(self, items: list[_Span]) -> _Rule:
        return _Rule(items[0], items[1])  # type: ignore[arg-type]

    def at_rule(self, items: list[object]) -> _AtRule:
        keyword = items[0]
        prelude = next((i for i in items[1:] if isinstance(i, _Prelude)), None)
        block = next((i for i in items[1:] if isinstance(i, _Block)), None)
        return _AtRule(str(keyword).lower(), keyword.start_pos, prelude, block)  # type: ignore[union-attr]

    def start(self, items: list[object]) -> list[_Sentinel]:
        return [i for i in items if isinstance(i, _Sentinel)]


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


def _assemble(source: str, statements: list[_Sentinel]) -> StyleDeclarationMap:
    rules: list[StyleRule] = []
    variables: dict[str, str] = {}
    root_blocks: list[str] = []
    keyframes: list[Keyframes] = []
    media: list[str] = []

    for order, stmt in enumerate(statements):
        if isinstance(stmt, _Rule):
            prelude = strip_comments(source[stmt.prelude.start : stmt.prelude.end])
            body = source[stmt.block.start + 1 : stmt.block.end - 1]
            declarations = parse_declarations(body)
            for raw in split_top_level(prelude, ","):
                selector = _normalize_selector(raw)
                rules.append(StyleRule(selector, declarations, order))
                if selector == ":root" and declarations:
                    for decl in declarations:
                        if decl.property.startswith("--"):
                            variables[decl.property] = decl.value
                    lines = "\n".join(f"  {d};" for d in declarations)
                    root_blocks.append(f":root {{\n{lines}\n}}")

        elif isinstance(stmt, _AtRule):
            if stmt.block is None:
                # Statement at-rules (@import, @charset, ...) carry no styles.
                continue
            text = source[stmt.start : stmt.block.end].strip()
            if stmt.keyword in _KEYFRAMES:
                name = ""
                if stmt.prelude is not None:
                    name = source[stmt.prelude.start : stmt.prelude.end].strip()
                keyframes.append(Keyframes(name=name, rule=text))
            else:
                media.append(text)

    return StyleDeclarationMap(
        rules=tuple(rules),
        variables=variables,
        root_styles="\n".join(root_blocks),
        keyframes=tuple(keyframes),
        media_queries=tuple(media),
    )


def parse_stylesheet(source: str, *, strict: bool = False) -> StyleDeclarationMap:
    """Parse CSS text into a StyleDeclarationMap.

    Malformed CSS yields an empty map (logged) unless *strict* is set, in
    which case StylesheetParseError is raised.
    """
    if not source or not source.strip():
        return StyleDeclarationMap()
    try:
        tree = _get_parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        if strict:
            raise StylesheetParseError(str(e), line=line, column=column, cause=e) from e
        log.warning("Stylesheet could not be parsed (line %s, column %s): %s", line, column, e)
        return StyleDeclarationMap()
    statements = CssTransformer().transform(tree)
    return _assemble(source, statements)
