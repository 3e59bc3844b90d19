"""SVG optimizer backends.

Each backend exposes ``async optimize(svg_text) -> str``. The transform awaits
exactly one call per (file, color) unit and wraps any exception raised here in
OptimizerFailure.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from lxml import etree

from svgcss.config import settings
from svgcss.engine.registry import optimizer
from svgcss.errors import MalformedSvg
from svgcss.svg.parser import localname, parse_document

logger = logging.getLogger(__name__)


@runtime_checkable
class Optimizer(Protocol):
    async def optimize(self, svg_text: str) -> str: ...


# ── In-process minifier ───────────────────────────────────────────────────

EDITOR_NAMESPACES = (
    "http://www.inkscape.org/namespaces/inkscape",
    "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
)

REMOVE_TAGS = {"metadata"}

# Presentation attributes whose value is already the SVG default
DEFAULT_ATTRS = {
    "fill-opacity": "1",
    "stroke-opacity": "1",
    "stroke-dasharray": "none",
}

ROOT_ONLY_ATTRS = ("version",)


def _namespace(name: str) -> str:
    return name[1:].split("}", 1)[0] if name.startswith("{") else ""


def _is_editor_name(name: str) -> bool:
    return _namespace(name) in EDITOR_NAMESPACES


def _strip_whitespace(elem: etree._Element) -> None:
    # Whitespace between tags only; text content of <text>/<style> is kept
    if len(elem) and elem.text is not None and not elem.text.strip():
        elem.text = None
    for child in elem:
        if child.tail is not None and not child.tail.strip():
            child.tail = None


def minify_svg(svg_text: str) -> str:
    """Deterministic, idempotent cleanup of SVG markup."""
    tree = parse_document(
        svg_text,
        remove_comments=True,
        remove_pis=True,
        remove_blank_text=True,
    )
    root = tree.getroot()

    # Output drops the DOCTYPE, so any entity still referenced would dangle
    unresolved = [e.name for e in root.iter(etree.Entity)]
    if unresolved:
        raise MalformedSvg(f"Unresolved entity reference(s): {', '.join(sorted(set(unresolved)))}")

    doomed = [
        el for el in root.iter(etree.Element)
        if el is not root and (localname(el) in REMOVE_TAGS or _is_editor_name(el.tag))
    ]
    for el in doomed:
        parent = el.getparent()
        if parent is not None:
            parent.remove(el)

    for attr in ROOT_ONLY_ATTRS:
        root.attrib.pop(attr, None)

    for el in root.iter(etree.Element):
        for attr in list(el.attrib):
            if _is_editor_name(attr) or DEFAULT_ATTRS.get(attr) == el.get(attr):
                del el.attrib[attr]
        _strip_whitespace(el)

    etree.cleanup_namespaces(root)
    return etree.tostring(root, encoding="unicode")


@optimizer(name="minify", description="In-process lxml cleanup (default)")
class MinifyOptimizer:
    async def optimize(self, svg_text: str) -> str:
        # CPU-bound; keep the event loop free
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, minify_svg, svg_text)


# ── External svgo ─────────────────────────────────────────────────────────


@optimizer(name="svgo", description="External svgo CLI over stdin/stdout")
class SvgoOptimizer:
    def __init__(self, binary: str | None = None, args: Sequence[str] = ()) -> None:
        self.binary = binary or settings.svgcss_svgo_binary
        self.args = list(args)

    def available(self) -> bool:
        return shutil.which(self.binary) is not None

    async def optimize(self, svg_text: str) -> str:
        if not self.available():
            raise FileNotFoundError(f"'{self.binary}' not found. Install with: npm i -g svgo")

        logger.debug("Running %s on %d chars", self.binary, len(svg_text))
        proc = await asyncio.create_subprocess_exec(
            self.binary, "-i", "-", "-o", "-", *self.args,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await proc.communicate(svg_text.encode("utf-8"))
        if proc.returncode != 0:
            raise RuntimeError(
                f"{self.binary} exited with status {proc.returncode}: {stderr.decode('utf-8', 'replace').strip()}"
            )
        return stdout.decode("utf-8").strip()


@optimizer(name="passthrough", description="No optimization")
class PassthroughOptimizer:
    async def optimize(self, svg_text: str) -> str:
        return svg_text
