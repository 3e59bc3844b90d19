"""Transform driver — SVG records in, one stylesheet out.

Per record: inspect → recolor × N colors → optimize → build rule → accumulate.
Records are handled strictly one at a time in call order; ``flush()`` waits for
any record still in flight before rendering the stylesheet.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncIterable, Iterable, Mapping
from typing import Any

from svgcss.config import settings
from svgcss.engine.config import TransformOptions
from svgcss.engine.context import InputRecord, OutputRecord, StylesheetContext, TransformState
from svgcss.engine.registry import OptimizerRegistry, get_registry
from svgcss.errors import OptimizerFailure, UnsupportedInputKind
from svgcss.svg.optimizer import Optimizer
from svgcss.svg.parser import decode_svg, get_dimensions
from svgcss.svg.recolor import set_fill_color
from svgcss.svg.serializer import build_css_rule, color_suffix, encode_data_uri, normalize_file_name

logger = logging.getLogger(__name__)


class SvgCssTransform:
    """Collects CSS rules for SVG records and emits them as one stylesheet."""

    def __init__(
        self,
        options: TransformOptions | Mapping[str, Any] | None = None,
        optimizer: Optimizer | None = None,
        registry: OptimizerRegistry | None = None,
    ) -> None:
        if not isinstance(options, TransformOptions):
            options = TransformOptions.from_mapping(options)
        self.options = options
        self.registry = registry or get_registry()
        self.optimizer = optimizer or self._resolve_optimizer()
        self.ctx = StylesheetContext()
        self._lock = asyncio.Lock()
        self._started = time.perf_counter()

    def _resolve_optimizer(self) -> Optimizer:
        name = self.options.optimizer or settings.svgcss_optimizer
        if name not in self.registry:
            known = ", ".join(s.name for s in self.registry.all())
            raise ValueError(f"Unknown optimizer {name!r} (registered: {known})")
        return self.registry.create(name)

    @property
    def state(self) -> TransformState:
        return self.ctx.state

    async def transform(self, record: InputRecord) -> list[str]:
        """Handle one record; returns the rules it contributed (possibly none)."""
        async with self._lock:
            if self.ctx.state is not TransformState.COLLECTING:
                raise RuntimeError("Stylesheet already flushed")

            if record.is_stream:
                raise UnsupportedInputKind("Streaming not supported", path=record.path)

            if record.is_null:
                self.ctx.files_dropped += 1
                logger.debug("Dropping empty record %s", record.path)
                return []

            rules = await self._build_rules(record)
            self.ctx.files_seen += 1
            self.ctx.extend(rules)
            return rules

    async def _build_rules(self, record: InputRecord) -> list[str]:
        svg_text = decode_svg(record.contents, path=record.path)

        width, height = get_dimensions(svg_text, path=record.path).resolve(
            self.options.default_width, self.options.default_height
        )
        name = normalize_file_name(record.path)

        if self.options.multi_color:
            # Recolor the original text each time so fills never compound
            variants = [
                (color_suffix(color), set_fill_color(svg_text, color, path=record.path))
                for color in self.options.fill_colors
            ]
        else:
            variants = [("", svg_text)]

        logger.debug("%s → %s (%d variant(s), %s × %s)", record.path, name, len(variants), width, height)

        optimized = await self._optimize_all([text for _, text in variants], record.path)

        return [
            build_css_rule(name, suffix, encode_data_uri(svg), width, height, self.options)
            for (suffix, _), svg in zip(variants, optimized)
        ]

    async def _optimize_all(self, texts: list[str], path: str) -> list[str]:
        """Optimize every variant concurrently; results come back in input order."""
        tasks = [asyncio.ensure_future(self._optimize(text, path)) for text in texts]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

    async def _optimize(self, svg_text: str, path: str) -> str:
        t0 = time.perf_counter()
        try:
            result = await self.optimizer.optimize(svg_text)
        except Exception as e:
            raise OptimizerFailure(f"{type(e).__name__}: {e}", path=path) from e
        logger.debug("  optimized %s in %.1fms (%d → %d chars)",
                     path, (time.perf_counter() - t0) * 1000, len(svg_text), len(result))
        return result

    async def flush(self) -> OutputRecord:
        """End of input: render the accumulated rules as the single output record."""
        async with self._lock:
            if self.ctx.state is not TransformState.COLLECTING:
                raise RuntimeError("Stylesheet already flushed")
            self.ctx.state = TransformState.FLUSHED
            output = OutputRecord(path=self.options.output_file_name, contents=self.ctx.render())

        logger.info(
            "Stylesheet %s: %d rules from %d files (%d empty) in %.0fms",
            output.path,
            self.ctx.num_rules,
            self.ctx.files_seen,
            self.ctx.files_dropped,
            (time.perf_counter() - self._started) * 1000,
        )
        return output

    async def run(self, records: Iterable[InputRecord] | AsyncIterable[InputRecord]) -> OutputRecord:
        """Transform every record in order, then flush. Any error aborts without output."""
        if isinstance(records, AsyncIterable):
            async for record in records:
                await self.transform(record)
        else:
            for record in records:
                await self.transform(record)
        return await self.flush()


def create_transform(
    options: TransformOptions | Mapping[str, Any] | None = None,
    optimizer: Optimizer | None = None,
) -> SvgCssTransform:
    """Factory function for creating a transform instance."""
    return SvgCssTransform(options=options, optimizer=optimizer)


def build_stylesheet(
    records: Iterable[InputRecord],
    options: TransformOptions | Mapping[str, Any] | None = None,
    optimizer: Optimizer | None = None,
) -> OutputRecord:
    """Blocking convenience wrapper: one full run on a fresh event loop."""
    return asyncio.run(create_transform(options, optimizer).run(records))
