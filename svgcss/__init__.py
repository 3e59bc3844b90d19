"""Turn a set of SVG icons into one data-URI stylesheet."""

from svgcss.engine import (
    InputRecord,
    OutputRecord,
    SvgCssTransform,
    TransformOptions,
    build_stylesheet,
    create_transform,
)
from svgcss.errors import MalformedSvg, OptimizerFailure, SvgCssError, UnsupportedInputKind

__version__ = "0.1.0"

__all__ = [
    "InputRecord",
    "OutputRecord",
    "SvgCssTransform",
    "TransformOptions",
    "build_stylesheet",
    "create_transform",
    "SvgCssError",
    "UnsupportedInputKind",
    "MalformedSvg",
    "OptimizerFailure",
]
