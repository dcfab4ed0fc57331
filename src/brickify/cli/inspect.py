"""CLI command: brickify inspect -- summarise a stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from brickify.cascade.selectors import classify_selector, specificity
from brickify.errors import StylesheetParseError
from brickify.stylesheet.parser import parse_stylesheet


@click.command()
@click.argument("css_file", type=click.Path(exists=True, dir_okay=False))
def inspect(css_file: str) -> None:
    """Parse a CSS file and display what the converter will see.

    Shows every selector with its kind and specificity, custom properties,
    and the at-rules that are carried through as text.
    """
    css_path = Path(css_file)

    try:
        source = css_path.read_text(encoding="utf-8")
        style_map = parse_stylesheet(source, strict=True)
    except StylesheetParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Stylesheet: {css_path.name}")
    click.echo(f"Rules:      {len(style_map.rules)}")
    click.echo(f"Variables:  {len(style_map.variables)}")
    click.echo(f"Keyframes:  {len(style_map.keyframes)}")
    click.echo(f"Media:      {len(style_map.media_queries)}")
    click.echo()

    # Selectors
    click.echo("Selectors:")
    for selector in style_map.selectors():
        kind = classify_selector(selector).value
        declarations = style_map.declarations_for(selector)
        click.echo(
            f"  {selector}  kind={kind}  specificity={specificity(selector)}"
            f"  declarations={len(declarations)}"
        )

    if style_map.variables:
        click.echo()
        click.echo("Variables:")
        for name, value in style_map.variables.items():
            click.echo(f"  {name}: {value}")

    if style_map.keyframes:
        click.echo()
        click.echo("Keyframes:")
        for frames in style_map.keyframes:
            click.echo(f"  {frames.name}")
