"""Shared test fixtures."""

from __future__ import annotations

import asyncio

import pytest

from svgcss.engine.context import InputRecord


ARROW_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="20" height="20" viewBox="0 0 20 20">
  <path d="M10 2 L18 10 L10 18 Z"/>
</svg>'''

NO_SIZE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

PERCENT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="50%" height="2em" viewBox="0 0 24 24">
  <rect x="2" y="2" width="20" height="20"/>
</svg>'''

FILLED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" fill="#000000">
  <rect x="0" y="0" width="24" height="24"/>
</svg>'''

# Editor cruft the minifier should strip
INKSCAPE_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<!-- Created with Inkscape -->
<svg xmlns="http://www.w3.org/2000/svg"
     xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape"
     xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd"
     version="1.1" width="16" height="16" inkscape:version="1.3">
  <metadata>
    <rdf>whatever</rdf>
  </metadata>
  <sodipodi:namedview id="base" pagecolor="#ffffff"/>
  <g inkscape:label="Layer 1">
    <path d="M0 0 L16 16" stroke="#000" stroke-opacity="1" fill-opacity="0.5"/>
  </g>
</svg>'''

# Illustrator-style export: styles held in an internal DOCTYPE entity
ENTITY_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE svg [
  <!ENTITY st0 "fill:red;">
]>
<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">
  <style>.a{&st0;}</style>
  <rect class="a" width="10" height="10"/>
</svg>'''

LATIN1_SVG = (
    '<?xml version="1.0" encoding="ISO-8859-1"?>'
    '<svg xmlns="http://www.w3.org/2000/svg" width="4" height="4"><title>caf\u00e9</title></svg>'
).encode("latin-1")

NOT_XML = "<svg width='1'"

NOT_SVG = '<html xmlns="http://www.w3.org/1999/xhtml"><body/></html>'


class FakeOptimizer:
    """Records every call; optional per-call delays to reorder completions."""

    def __init__(self, delays: list[float] | None = None) -> None:
        self.calls: list[str] = []
        self.completed: list[str] = []
        self._delays = list(delays or [])

    async def optimize(self, svg_text: str) -> str:
        self.calls.append(svg_text)
        if self._delays:
            await asyncio.sleep(self._delays.pop(0))
        self.completed.append(svg_text)
        return svg_text


class FailingOptimizer:
    async def optimize(self, svg_text: str) -> str:
        raise ValueError("boom")


def record(path: str, svg: str | None) -> InputRecord:
    return InputRecord(path=path, contents=svg.encode("utf-8") if svg is not None else None)


@pytest.fixture
def arrow_svg() -> str:
    return ARROW_SVG


@pytest.fixture
def fake_optimizer() -> FakeOptimizer:
    return FakeOptimizer()
