"""svgcss transform engine."""

from svgcss.engine.config import TransformOptions
from svgcss.engine.context import Dimensions, InputRecord, OutputRecord, StylesheetContext
from svgcss.engine.registry import get_registry, optimizer
from svgcss.engine.pipeline import SvgCssTransform, build_stylesheet, create_transform

__all__ = [
    "TransformOptions",
    "Dimensions",
    "InputRecord",
    "OutputRecord",
    "StylesheetContext",
    "get_registry",
    "optimizer",
    "SvgCssTransform",
    "build_stylesheet",
    "create_transform",
]
