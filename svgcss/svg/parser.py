"""SVG inspector — facade over lxml.

Reads declared width/height off the first <svg> element. Any document that
does not parse, or has no <svg> element, is a hard error.
"""

from __future__ import annotations

import logging
import re

from lxml import etree

from svgcss.engine.context import Dimensions
from svgcss.errors import MalformedSvg

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

# Bare numbers get "px"; "24pt", "50%" and friends pass through verbatim
_NUMERIC_RE = re.compile(r"^(?:\d+\.?\d*|\.\d+)$")


def _make_parser(**kwargs) -> etree.XMLParser:
    # Parsers are not shareable across threads, so one per call.
    # Internal DOCTYPE entities are expanded; external ones are never fetched.
    return etree.XMLParser(resolve_entities="internal", no_network=True, **kwargs)


def parse_document(svg_text: str | bytes, *, path: str | None = None, **parser_kwargs) -> etree._ElementTree:
    """Parse SVG text into an lxml tree. Raises MalformedSvg on bad XML."""
    data = svg_text.encode("utf-8") if isinstance(svg_text, str) else svg_text
    try:
        root = etree.fromstring(data, _make_parser(**parser_kwargs))
    except etree.XMLSyntaxError as e:
        raise MalformedSvg(f"Invalid XML: {e}", path=path) from e
    return root.getroottree()


def decode_svg(data: bytes | str, *, path: str | None = None) -> str:
    """SVG content as text. Non-UTF-8 bytes go through lxml, which honours the XML declaration."""
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError:
        pass
    tree = parse_document(bytes(data), path=path)
    logger.debug("Re-encoded non-UTF-8 document %s", path or "<svg>")
    return etree.tostring(tree, encoding="unicode")


def localname(elem: etree._Element) -> str:
    return etree.QName(elem).localname


def find_svg_element(tree: etree._ElementTree, *, path: str | None = None) -> etree._Element:
    """First <svg> element in document order, namespaced or not."""
    for elem in tree.getroot().iter(etree.Element):
        if localname(elem) == "svg":
            return elem
    raise MalformedSvg("No <svg> element found", path=path)


def normalize_length(value: str | None) -> str | None:
    if not value:
        return None
    if _NUMERIC_RE.match(value):
        return value + "px"
    return value


def get_dimensions(svg_text: str, *, path: str | None = None) -> Dimensions:
    """Declared width/height of the SVG, each None when absent."""
    svg = find_svg_element(parse_document(svg_text, path=path), path=path)
    dims = Dimensions(
        width=normalize_length(svg.get("width")),
        height=normalize_length(svg.get("height")),
    )
    logger.debug("Dimensions for %s: %s × %s", path or "<svg>", dims.width, dims.height)
    return dims
