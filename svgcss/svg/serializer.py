"""Write CSS rules that embed optimized SVG as data URIs."""

from __future__ import annotations

import re
from pathlib import PureWindowsPath
from urllib.parse import quote

from svgcss.engine.config import TransformOptions

DATA_URI_PREFIX = "data:image/svg+xml,"

# Same unreserved set as JavaScript's encodeURIComponent
_URI_SAFE = "-_.!~*'()"

_SEPARATOR_RE = re.compile(r"[.\s]")


def normalize_file_name(path: str) -> str:
    """Base name (either path separator) without .svg, lower-cased, dots and whitespace turned into hyphens.

    >>> normalize_file_name("icons/My Icon.V2.svg")
    'my-icon-v2'
    """
    # Windows paths split on both separators
    name = PureWindowsPath(path).name
    if name.lower().endswith(".svg"):
        name = name[: -len(".svg")]
    return _SEPARATOR_RE.sub("-", name.lower())


def color_suffix(color: str) -> str:
    """Class-name suffix for a fill color variant: '#FF0000' → 'ff0000'."""
    return color.lstrip("#").lower()


def encode_data_uri(svg_text: str) -> str:
    return DATA_URI_PREFIX + quote(svg_text, safe=_URI_SAFE)


def build_css_rule(
    normalized_file_name: str,
    suffix: str,
    encoded_svg: str,
    width: str,
    height: str,
    options: TransformOptions,
) -> str:
    """Format one CSS rule block.

    Selector and suffix are inserted verbatim; characters that are not valid
    in a class name are not escaped.
    """
    selector = f"{options.selector_prefix}{options.class_prefix}{normalized_file_name}{suffix}"
    lines = [
        f"{selector} {{",
        f'    background-image: url("{encoded_svg}");',
    ]
    if options.include_size:
        lines.append(f"    width:{width}; height:{height};")
    lines.append("}")
    return "\n".join(lines)
