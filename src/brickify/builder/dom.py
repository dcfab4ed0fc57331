"""Small helpers over BeautifulSoup tags."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from bs4 import BeautifulSoup, NavigableString, PageElement, Tag
from bs4.builder import ParserRejectedMarkup
from bs4.element import PreformattedString, Script, Stylesheet, TemplateString

log = logging.getLogger(__name__)

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


def parse_html(html: str) -> BeautifulSoup:
    """Parse *html*; markup the parser rejects yields an empty document."""
    try:
        return BeautifulSoup(html or "", "html.parser")
    except ParserRejectedMarkup as e:
        log.warning("HTML could not be parsed: %s", e)
        return BeautifulSoup("", "html.parser")


def is_text(node: PageElement) -> bool:
    """True for character data; comments and script or style bodies are excluded."""
    return isinstance(node, NavigableString) and not isinstance(
        node, (PreformattedString, Script, Stylesheet, TemplateString)
    )


def classes_of(element: Tag) -> list[str]:
    """The element's class names in document order, without duplicates."""
    raw = element.get("class") or []
    if isinstance(raw, str):
        raw = raw.split()
    seen: dict[str, None] = {}
    for name in raw:
        if name:
            seen.setdefault(name, None)
    return list(seen)


def attr(element: Tag, name: str, default: str = "") -> str:
    """An attribute as a single string; multi-valued ones are space-joined."""
    value = element.get(name)
    if value is None:
        return default
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def text_of(element: Tag) -> str:
    return element.get_text().strip()


def inner_html(element: Tag) -> str:
    return element.decode_contents().strip()


def outer_html(element: Tag) -> str:
    return str(element)


def element_children(element: Tag) -> list[Tag]:
    return [c for c in element.children if isinstance(c, Tag)]


def has_only_text(element: Tag) -> bool:
    return all(is_text(c) for c in element.children)


def is_empty(element: Tag) -> bool:
    """No text content and no element children."""
    return not text_of(element) and not element_children(element)


def closest(element: PageElement, names: Iterable[str]) -> Tag | None:
    """The nearest ancestor whose tag name is in *names*."""
    wanted = set(names)
    parent = element.parent
    while isinstance(parent, Tag):
        if parent.name in wanted:
            return parent
        parent = parent.parent
    return None


def parent_tag(node: PageElement) -> str | None:
    parent = node.parent
    if isinstance(parent, Tag) and not isinstance(parent, BeautifulSoup):
        return parent.name
    return None


def top_level_nodes(soup: BeautifulSoup) -> Iterator[PageElement]:
    """Children of ``<body>``, or of the document itself for fragments."""
    root: Tag = soup
    if soup.body is not None:
        root = soup.body
    elif soup.html is not None:
        root = soup.html
    for child in root.children:
        if isinstance(child, Tag) and child.name == "head":
            continue
        yield child


def head_nodes(soup: BeautifulSoup) -> list[Tag]:
    if soup.head is None:
        return []
    return element_children(soup.head)
