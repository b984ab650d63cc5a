"""
Conversion settings.

Layout values are in millimetres except font sizes, which are in points.
The defaults reproduce the fixed layout of the converter: 6 mm text lines,
4 mm between paragraphs, 40x10 mm table cells in 10 pt, and every image
placed at (10, 10) with a 50x50 mm box.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Tuple

from reportlab.lib.pagesizes import A4, LETTER, landscape

PAGE_SIZES = {
    "A4": A4,
    "LETTER": LETTER,
}

ORIENTATIONS = ("portrait", "landscape")

# PDF core font families
FONT_FAMILIES = ("Helvetica", "Times", "Courier")

RGB = Tuple[int, int, int]

NUMERIC_FIELDS = (
    "margin_left", "margin_top", "margin_right", "page_break_margin",
    "default_font_size", "line_height", "paragraph_spacing", "cell_margin",
    "table_font_size", "table_cell_width", "table_cell_height",
    "image_x", "image_y", "image_width", "image_height",
)


@dataclass(frozen=True)
class ConversionConfig:
    """
    Settings shared by the render mapper and the PDF canvas.

    With ``resolve_relationships`` on (the default), every image relationship
    of the main part also registers its media file under
    ``word/media/<relationship id>``, so a drawing referencing ``rId5`` finds
    ``word/media/image1.png`` through the relationships part. Turn it off to
    match drawings only against archive entries literally named
    ``word/media/<relationship id>``.
    """

    page_size: str = "A4"
    orientation: str = "portrait"
    margin_left: float = 10.0
    margin_top: float = 10.0
    margin_right: float = 10.0
    page_break_margin: float = 20.0
    auto_page_break: bool = True

    font_family: str = "Helvetica"
    default_font_size: float = 12.0
    default_text_color: RGB = (0, 0, 0)
    line_height: float = 6.0
    paragraph_spacing: float = 4.0
    cell_margin: float = 1.0

    table_font_size: float = 10.0
    table_cell_width: float = 40.0
    table_cell_height: float = 10.0

    image_x: float = 10.0
    image_y: float = 10.0
    image_width: float = 50.0
    image_height: float = 50.0

    preserve_document_order: bool = True
    resolve_relationships: bool = True
    deterministic_output: bool = True
    skip_unreadable_images: bool = False

    def __post_init__(self) -> None:
        for name in ("page_size", "orientation", "font_family"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string")
        for name in NUMERIC_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number")
        for name in ("auto_page_break", "preserve_document_order", "resolve_relationships",
                     "deterministic_output", "skip_unreadable_images"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a boolean")
        if not isinstance(self.default_text_color, tuple):
            raise ValueError("default_text_color must be a tuple")
        if self.page_size.upper() not in PAGE_SIZES:
            raise ValueError(f"Unsupported page size preset: {self.page_size}")
        if self.orientation not in ORIENTATIONS:
            raise ValueError(f"Unsupported orientation: {self.orientation}")
        if self.font_family not in FONT_FAMILIES:
            raise ValueError(f"Unsupported font family: {self.font_family}")
        if len(self.default_text_color) != 3 or any(
            not isinstance(c, int) or isinstance(c, bool) or not 0 <= c <= 255 for c in self.default_text_color
        ):
            raise ValueError("default_text_color must be three integers in 0..255")
        for name in ("default_font_size", "table_font_size", "line_height",
                     "table_cell_width", "table_cell_height", "image_width", "image_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        for name in ("margin_left", "margin_top", "margin_right", "page_break_margin",
                     "paragraph_spacing", "cell_margin"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

    @property
    def page_size_points(self) -> Tuple[float, float]:
        """Page size as a ReportLab (width, height) tuple in points."""
        size = PAGE_SIZES[self.page_size.upper()]
        if self.orientation == "landscape":
            size = landscape(size)
        return float(size[0]), float(size[1])

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "ConversionConfig":
        """Build a config from a plain mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(f"Unknown conversion options: {', '.join(unknown)}")
        values = dict(options)
        if isinstance(values.get("default_text_color"), (list, tuple)):
            values["default_text_color"] = tuple(values["default_text_color"])
        return cls(**values)

    def with_options(self, **options: Any) -> "ConversionConfig":
        return replace(self, **options)


DEFAULT_CONFIG = ConversionConfig()
