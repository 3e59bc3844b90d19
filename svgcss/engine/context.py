"""Records flowing in and out of the transform, and the per-run accumulator.

InputRecord  → one source file handed over by the host pipeline
OutputRecord → the single synthesized stylesheet
StylesheetContext → ordered rule list + run state, owned by one transform
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class InputRecord:
    """A source file as delivered by the host: a path plus its content."""

    path: str
    # bytes/str when buffered, None for a null record, anything else is a stream
    contents: Any = None

    @classmethod
    def from_path(cls, path: str | Path) -> "InputRecord":
        p = Path(path)
        return cls(path=str(p), contents=p.read_bytes())

    @property
    def is_null(self) -> bool:
        if self.contents is None:
            return True
        return isinstance(self.contents, (bytes, bytearray, str)) and len(self.contents) == 0

    @property
    def is_stream(self) -> bool:
        return self.contents is not None and not isinstance(self.contents, (bytes, bytearray, str))

    @property
    def text(self) -> str:
        if isinstance(self.contents, (bytes, bytearray)):
            return bytes(self.contents).decode("utf-8")
        return self.contents or ""


@dataclass(frozen=True)
class OutputRecord:
    path: str
    contents: str = ""

    def write_to(self, directory: str | Path) -> Path:
        target = Path(directory) / self.path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.contents, encoding="utf-8")
        return target


@dataclass(frozen=True)
class Dimensions:
    # None when the SVG does not declare the attribute
    width: str | None = None
    height: str | None = None

    def resolve(self, default_width: str, default_height: str) -> tuple[str, str]:
        return (self.width or default_width, self.height or default_height)


class TransformState(enum.Enum):
    COLLECTING = "collecting"
    FLUSHED = "flushed"


@dataclass
class StylesheetContext:
    """Mutable state for one run. Never shared between transforms."""

    rules: list[str] = field(default_factory=list)
    state: TransformState = TransformState.COLLECTING
    files_seen: int = 0
    files_dropped: int = 0

    @property
    def num_rules(self) -> int:
        return len(self.rules)

    def extend(self, rules: list[str]) -> None:
        if self.state is not TransformState.COLLECTING:
            raise RuntimeError("Stylesheet already flushed")
        self.rules.extend(rules)

    def render(self) -> str:
        return "\n".join(self.rules)
