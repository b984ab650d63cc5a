"""
Render instructions emitted by the render mapper.

Distances are in millimetres, font sizes in points. Instructions are plain
values: two mappings of the same content compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class SetFont:
    family: str
    style: str
    size: float


@dataclass(frozen=True)
class SetTextColor:
    red: int
    green: int
    blue: int

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)


@dataclass(frozen=True)
class TextCell:
    """Borderless cell, full width when ``width`` is 0, followed by a new line."""

    text: str
    height: float
    align: str = "L"
    width: float = 0.0


@dataclass(frozen=True)
class BorderedCell:
    """Fixed-size framed cell; the cursor moves right, not down."""

    text: str
    width: float
    height: float
    align: str = "C"


@dataclass(frozen=True)
class LineBreak:
    """Return to the left margin; ``height`` None repeats the last cell height."""

    height: Optional[float] = None


@dataclass(frozen=True)
class PlaceImage:
    """Image at an absolute position on the current page."""

    asset_key: str
    path: Path = field(compare=False)
    x: float
    y: float
    width: float
    height: float


Instruction = Union[SetFont, SetTextColor, TextCell, BorderedCell, LineBreak, PlaceImage]
