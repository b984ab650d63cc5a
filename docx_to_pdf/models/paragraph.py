"""Paragraph model for DOCX documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .run import Run


class Alignment(str, Enum):
    """Horizontal paragraph alignment."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    @classmethod
    def from_value(cls, value: Optional[str]) -> "Alignment":
        """Map a ``w:jc`` value; unknown or missing values fall back to LEFT."""
        if value == "center":
            return cls.CENTER
        if value == "right":
            return cls.RIGHT
        return cls.LEFT


@dataclass
class Paragraph:
    """Represents a paragraph with its runs and alignment."""

    position: int
    alignment: Alignment = Alignment.LEFT
    runs: List[Run] = field(default_factory=list)

    def get_text(self) -> str:
        return "".join(run.text for run in self.runs)
