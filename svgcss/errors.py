"""Error taxonomy. Every error is fatal to the run that raised it."""

from __future__ import annotations

PLUGIN_NAME = "svg-css"


class SvgCssError(Exception):
    """Base error, tagged with the failing stage and the offending file."""

    stage = "transform"

    def __init__(self, message: str, *, path: str | None = None, stage: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        if stage is not None:
            self.stage = stage

    def __str__(self) -> str:
        where = f" {self.path}:" if self.path else ""
        return f"{PLUGIN_NAME}: [{self.stage}]{where} {self.message}"


class UnsupportedInputKind(SvgCssError):
    """Record content is a live stream rather than buffered bytes/text."""

    stage = "input"


class MalformedSvg(SvgCssError):
    """SVG text does not parse, or has no <svg> element."""

    stage = "inspect"


class OptimizerFailure(SvgCssError):
    stage = "optimize"
