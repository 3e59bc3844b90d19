"""Tests for the optimizer backends."""

from __future__ import annotations

import asyncio
import stat
import sys

import pytest

from svgcss.engine.registry import get_registry
from svgcss.svg.optimizer import (
    MinifyOptimizer,
    Optimizer,
    PassthroughOptimizer,
    SvgoOptimizer,
    minify_svg,
)
from svgcss.svg.parser import get_dimensions
from svgcss.svg.parser import parse_document
from tests.conftest import ARROW_SVG, ENTITY_SVG, INKSCAPE_SVG


class TestMinify:
    def test_strips_editor_cruft(self):
        out = minify_svg(INKSCAPE_SVG)
        assert "<!--" not in out
        assert "<?xml" not in out
        assert "metadata" not in out
        assert "inkscape" not in out
        assert "sodipodi" not in out
        assert 'version="1.1"' not in out

    def test_drops_default_attrs_only(self):
        out = minify_svg(INKSCAPE_SVG)
        assert "stroke-opacity" not in out
        assert 'fill-opacity="0.5"' in out
        assert 'stroke="#000"' in out

    def test_no_whitespace_between_tags(self):
        out = minify_svg(ARROW_SVG)
        assert ">\n" not in out
        assert "> <" not in out
        assert out.startswith('<svg xmlns="http://www.w3.org/2000/svg"')

    def test_keeps_dimensions(self):
        assert get_dimensions(minify_svg(ARROW_SVG)).width == "20px"

    def test_idempotent(self):
        once = minify_svg(INKSCAPE_SVG)
        assert minify_svg(once) == once

    def test_text_content_kept(self):
        svg = '<svg xmlns="http://www.w3.org/2000/svg"><text>Hello  world</text></svg>'
        assert "<text>Hello  world</text>" in minify_svg(svg)

    def test_internal_entities_expanded(self):
        out = minify_svg(ENTITY_SVG)
        assert "&st0;" not in out
        assert "<!DOCTYPE" not in out
        assert ".a{fill:red;}" in out
        style = parse_document(out).getroot()[0]
        assert style.text == ".a{fill:red;}"

    def test_async_wrapper(self):
        out = asyncio.run(MinifyOptimizer().optimize(ARROW_SVG))
        assert out == minify_svg(ARROW_SVG)


def test_passthrough():
    assert asyncio.run(PassthroughOptimizer().optimize(ARROW_SVG)) == ARROW_SVG


def test_backends_registered():
    reg = get_registry()
    for name in ("minify", "svgo", "passthrough"):
        assert name in reg
        assert isinstance(reg.create(name), Optimizer)


class TestSvgo:
    def test_missing_binary(self):
        opt = SvgoOptimizer(binary="svgcss-no-such-binary")
        assert not opt.available()
        with pytest.raises(FileNotFoundError):
            asyncio.run(opt.optimize(ARROW_SVG))

    @pytest.mark.skipif(sys.platform == "win32", reason="needs a POSIX shell script")
    def test_pipes_through_binary(self, tmp_path):
        script = tmp_path / "fake-svgo"
        script.write_text("#!/bin/sh\ncat\n")
        script.chmod(script.stat().st_mode | stat.S_IEXEC)
        out = asyncio.run(SvgoOptimizer(binary=str(script)).optimize(ARROW_SVG))
        assert out == ARROW_SVG.strip()

    @pytest.mark.skipif(sys.platform == "win32", reason="needs a POSIX shell script")
    def test_nonzero_exit(self, tmp_path):
        script = tmp_path / "broken-svgo"
        script.write_text("#!/bin/sh\necho 'bad input' >&2\nexit 3\n")
        script.chmod(script.stat().st_mode | stat.S_IEXEC)
        with pytest.raises(RuntimeError, match="status 3: bad input"):
            asyncio.run(SvgoOptimizer(binary=str(script)).optimize(ARROW_SVG))
