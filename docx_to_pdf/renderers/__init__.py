"""Render instructions, the render mapper and the ReportLab page canvas."""

from .instructions import (
    BorderedCell,
    Instruction,
    LineBreak,
    PlaceImage,
    SetFont,
    SetTextColor,
    TextCell,
)
from .pdf_canvas import PdfCanvas
from .render_mapper import RenderMapper, map_tree

__all__ = [
    "BorderedCell",
    "Instruction",
    "LineBreak",
    "PdfCanvas",
    "PlaceImage",
    "RenderMapper",
    "SetFont",
    "SetTextColor",
    "TextCell",
    "map_tree",
]
