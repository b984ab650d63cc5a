"""Value resolution shared by the render mapper and the PDF canvas."""

from __future__ import annotations

import math
import re
from typing import Optional, Tuple, Union

from ..models import Alignment

DEFAULT_FONT_SIZE = 12.0

ALIGNMENT_CODES = {
    Alignment.LEFT: "L",
    Alignment.RIGHT: "R",
    Alignment.CENTER: "C",
}

FONT_VARIANTS = {
    "Helvetica": {
        "": "Helvetica",
        "B": "Helvetica-Bold",
        "I": "Helvetica-Oblique",
        "BI": "Helvetica-BoldOblique",
    },
    "Times": {
        "": "Times-Roman",
        "B": "Times-Bold",
        "I": "Times-Italic",
        "BI": "Times-BoldItalic",
    },
    "Courier": {
        "": "Courier",
        "B": "Courier-Bold",
        "I": "Courier-Oblique",
        "BI": "Courier-BoldOblique",
    },
}

_HEX_COLOR = re.compile(r"[0-9A-Fa-f]{6}")

RGB = Tuple[int, int, int]


def font_style(bold: bool, italic: bool) -> str:
    """Combine bold and italic flags into a style string (``""``, ``"B"``, ``"I"``, ``"BI"``)."""
    style = ""
    if bold:
        style += "B"
    if italic:
        style += "I"
    return style


def resolve_font_size(half_points: Optional[str], default: float = DEFAULT_FONT_SIZE) -> float:
    """
    Convert a ``w:sz`` value (half-points) into points.

    Absent, unparseable, non-finite, zero or negative values give ``default``.
    """
    if half_points is None:
        return default
    try:
        value = float(str(half_points).strip())
    except (TypeError, ValueError):
        return default
    if not math.isfinite(value) or value <= 0:
        return default
    return value / 2.0


def parse_hex_color(value: Optional[str]) -> Optional[RGB]:
    """Parse exactly six hex digits as (red, green, blue); anything else is None."""
    if value is None:
        return None
    token = str(value).strip()
    if not _HEX_COLOR.fullmatch(token):
        return None
    return int(token[0:2], 16), int(token[2:4], 16), int(token[4:6], 16)


def resolve_text_color(value: Optional[str], default: RGB = (0, 0, 0)) -> RGB:
    return parse_hex_color(value) or default


def alignment_code(alignment: Union[Alignment, str, None]) -> str:
    """Map an alignment to a cell code: left L, right R, center C, anything else L."""
    if not isinstance(alignment, Alignment):
        alignment = Alignment.from_value(alignment)
    return ALIGNMENT_CODES.get(alignment, "L")


def resolve_font_name(family: str, style: str = "") -> str:
    """Resolve a family and style string to a PDF core font name."""
    variants = FONT_VARIANTS.get(family)
    if variants is None:
        raise ValueError(f"Unsupported font family: {family}")
    key = ("B" if "B" in style.upper() else "") + ("I" if "I" in style.upper() else "")
    return variants[key]
