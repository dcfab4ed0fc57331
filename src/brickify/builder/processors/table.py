"""Tables, rebuilt from divs with table display styles."""

from __future__ import annotations

from bs4 import Tag

from brickify.builder.context import BuildContext
from brickify.builder.dom import attr, element_children, inner_html, text_of
from brickify.builder.model import Container, Leaf, ProcessorResult

CELL_TAGS = ("td", "th")
STRUCTURE_STYLES = {
    "table": "display: table; border-collapse: collapse; width: 100%;",
    "thead": "display: table-header-group;",
    "tbody": "display: table-row-group;",
    "tfoot": "display: table-footer-group;",
    "tr": "display: table-row;",
}
CELL_STYLE = "display: table-cell; padding: 8px; border: 1px solid #ddd;"
TABLE_ATTRIBUTES = ("border", "cellpadding", "cellspacing", "width")


class TableProcessor:
    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        return element.name in CELL_TAGS or element.name in STRUCTURE_STYLES

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        if element.name in CELL_TAGS:
            return self._cell(element, ctx)

        tag = element.name
        settings = {"tag": "custom", "customTag": tag, "style": STRUCTURE_STYLES[tag]}
        if tag == "table":
            for name in TABLE_ATTRIBUTES:
                if element.has_attr(name):
                    settings[name] = attr(element, name)
        return Container(ctx.new_node("div", settings, label=ctx.label_for(element)))

    @staticmethod
    def _cell(element: Tag, ctx: BuildContext) -> ProcessorResult:
        tag = element.name
        rich = bool(element_children(element))
        settings = {
            "tag": "custom",
            "customTag": tag,
            "text": inner_html(element) if rich else text_of(element),
        }
        if rich:
            settings["isRichText"] = True

        style = CELL_STYLE + (" font-weight: bold;" if tag == "th" else "")
        if element.has_attr("align"):
            style += f" text-align: {attr(element, 'align')};"
        if element.has_attr("valign"):
            style += f" vertical-align: {attr(element, 'valign')};"
        settings["style"] = style

        for name in ("scope", "rowspan", "colspan"):
            if element.has_attr(name):
                settings[name] = attr(element, name)

        label = "Table Header Cell" if tag == "th" else "Table Cell"
        return Leaf(ctx.new_node("text-basic", settings, label=ctx.label_for(element, label)))
