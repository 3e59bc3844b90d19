"""Set a global fill color on an SVG document."""

from __future__ import annotations

from lxml import etree

from svgcss.errors import MalformedSvg
from svgcss.svg.parser import find_svg_element, parse_document


def set_fill_color(svg_text: str, color: str, *, path: str | None = None) -> str:
    """Return svg_text with fill=color on the <svg> element, overwriting any existing fill.

    Pure: always start from the original text so colors never stack.
    """
    try:
        tree = parse_document(svg_text, path=path)
        svg = find_svg_element(tree, path=path)
    except MalformedSvg as e:
        e.stage = "recolor"
        raise
    svg.set("fill", color)
    return etree.tostring(tree, encoding="unicode")
