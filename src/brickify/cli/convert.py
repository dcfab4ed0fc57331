"""CLI command: brickify convert -- turn an HTML file into builder JSON."""

from __future__ import annotations

import json
from pathlib import Path

import click

from brickify.config import ConvertOptions, SelectorTarget, StyleMode
from brickify.converter import convert as run_convert
from brickify.errors import OptionsError


def _read(path: str | None) -> str:
    return Path(path).read_text(encoding="utf-8") if path else ""


@click.command()
@click.argument("html_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--css", "css_file", type=click.Path(exists=True, dir_okay=False), help="Stylesheet file")
@click.option("--js", "js_file", type=click.Path(exists=True, dir_okay=False), help="Script file")
@click.option(
    "--inline-styles",
    type=click.Choice([m.value for m in StyleMode]),
    default=StyleMode.CLASS.value,
    show_default=True,
    help="What to do with style attributes",
)
@click.option("--show-node-class", is_flag=True, help="Label nodes with their first class")
@click.option(
    "--merge-non-class-selectors",
    is_flag=True,
    help="Merge pseudo and complex selectors into the element's class",
)
@click.option(
    "--target",
    type=click.Choice([t.value for t in SelectorTarget]),
    default=SelectorTarget.CLASS.value,
    show_default=True,
    help="Write matched styles to global classes or to element ids",
)
@click.option("--no-js", is_flag=True, help="Drop scripts from the output")
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Write JSON here instead of stdout")
@click.option("--indent", default=2, type=int, show_default=True, help="JSON indent")
def convert(
    html_file: str,
    css_file: str | None,
    js_file: str | None,
    inline_styles: str,
    show_node_class: bool,
    merge_non_class_selectors: bool,
    target: str,
    no_js: bool,
    output: str | None,
    indent: int,
) -> None:
    """Convert HTML_FILE (plus optional CSS and JS) into builder clipboard JSON."""
    try:
        options = ConvertOptions.from_mapping({
            "inlineStyleHandling": inline_styles,
            "showNodeClass": show_node_class,
            "mergeNonClassSelectors": merge_non_class_selectors,
            "cssSelectorTarget": target,
            "includeJs": not no_js,
        })
    except OptionsError as exc:
        raise click.UsageError(str(exc)) from exc

    document = run_convert(_read(html_file), _read(css_file), _read(js_file), options)
    text = json.dumps(document, indent=indent if indent > 0 else None)

    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        click.echo(
            f"Wrote {len(document['content'])} elements and "
            f"{len(document['globalClasses'])} classes to {output}",
            err=True,
        )
    else:
        click.echo(text)
