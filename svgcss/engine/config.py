"""Transform options, resolved once per run and immutable afterwards."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TransformOptions(BaseModel):
    """Controls selector naming, size declarations and color expansion.

    Field aliases are the option names of the original gulp plugin, so
    ``TransformOptions.model_validate({"fillColors": ["#f00"]})`` works as well
    as ``TransformOptions(fill_colors=["#f00"])``.

    Defaults apply only to absent fields. An explicit empty string or empty
    list is kept as given; use ``was_supplied()`` to tell the two apart.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    output_base_name: str = Field(default="icons", alias="fileName")
    class_prefix: str = Field(default="icon-", alias="cssPrefix")
    selector_prefix: str = Field(default=".", alias="cssSelector")
    include_size: bool = Field(default=False, alias="addSize")
    default_width: str = Field(default="16px", alias="defaultWidth")
    default_height: str = Field(default="16px", alias="defaultHeight")
    output_extension: str = Field(default="css", alias="fileExt")
    fill_colors: tuple[str, ...] = Field(default=(), alias="fillColors")

    # Optimizer backend name; None means Settings.svgcss_optimizer
    optimizer: str | None = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None) -> "TransformOptions":
        return cls.model_validate(dict(options or {}))

    def was_supplied(self, name: str) -> bool:
        """True when the option was given explicitly, by field name or alias."""
        for field_name, info in type(self).model_fields.items():
            if name in (field_name, info.alias):
                return field_name in self.model_fields_set
        return False

    @property
    def output_file_name(self) -> str:
        return f"{self.output_base_name}.{self.output_extension}"

    @property
    def multi_color(self) -> bool:
        return len(self.fill_colors) > 0
