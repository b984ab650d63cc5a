"""Run model for DOCX documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class RunProperties:
    """
    Formatting read from ``w:rPr``.

    ``font_size`` and ``color`` keep the raw attribute values; ``None`` means
    the property was absent. Defaults are applied at render time.
    """

    bold: bool = False
    italic: bool = False
    font_size: Optional[str] = None
    color: Optional[str] = None


@dataclass
class Run:
    """Represents a run of text with consistent formatting."""

    properties: RunProperties = field(default_factory=RunProperties)
    texts: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(self.texts)

    def is_bold(self) -> bool:
        return self.properties.bold

    def is_italic(self) -> bool:
        return self.properties.italic
