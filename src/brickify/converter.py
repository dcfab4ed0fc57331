"""Top-level conversion: HTML, CSS and JS text in, builder clipboard JSON out."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from bs4 import BeautifulSoup

from brickify.assembler import assemble
from brickify.builder.context import BuildContext
from brickify.builder.dom import parse_html
from brickify.builder.walker import TreeBuilder
from brickify.cascade.matcher import SelectorMatcher
from brickify.classes import GlobalClassRegistry
from brickify.config import ConvertOptions
from brickify.ids import IdGenerator
from brickify.mappers.registry import MapperRegistry
from brickify.stylesheet.parser import parse_stylesheet

log = logging.getLogger(__name__)


def embedded_css(soup: BeautifulSoup) -> str:
    """Text of every ``<style>`` element in the document, in order."""
    return "\n".join(tag.get_text() for tag in soup.find_all("style"))


def convert(
    html: str,
    css: str = "",
    js: str = "",
    options: ConvertOptions | Mapping[str, Any] | None = None,
    *,
    seed: int | None = None,
) -> dict[str, Any]:
    """Convert an HTML fragment and its stylesheet into a builder document.

    Args:
        html: Markup to convert; a full document or a fragment.
        css: Stylesheet text. ``<style>`` blocks in *html* are appended to it.
        js: Script text emitted as a code element when ``include_js`` is set.
        options: A ConvertOptions or a camelCase/snake_case mapping.
        seed: Seed for the id generator, for reproducible ids.

    Returns:
        The document as a JSON-serialisable dict.

    Raises:
        OptionsError: If *options* holds an invalid value.
    """
    opts = options if isinstance(options, ConvertOptions) else ConvertOptions.from_mapping(options)

    soup = parse_html(html)
    stylesheet = "\n".join(part for part in (css, embedded_css(soup)) if part and part.strip())
    style_map = parse_stylesheet(stylesheet)

    ids = IdGenerator(seed)
    mappers = MapperRegistry(ids)
    classes = GlobalClassRegistry(mappers, ids)
    ctx = BuildContext(
        options=opts,
        ids=ids,
        style_map=style_map,
        matcher=SelectorMatcher(style_map),
        mappers=mappers,
        classes=classes,
    )

    arena = TreeBuilder(ctx).build(soup)
    document = assemble(
        arena, classes, style_map, id_factory=ids, js=js, include_js=opts.include_js
    )
    log.info(
        "Converted %d elements with %d global classes", len(document.content), len(document.global_classes)
    )
    return document.to_dict()
