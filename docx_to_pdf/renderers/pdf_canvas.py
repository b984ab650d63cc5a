"""
Page canvas over ReportLab.

Executes render instructions on a ``reportlab.pdfgen.canvas.Canvas``. The
public coordinates are millimetres with the origin at the top-left corner of
the page; they are converted to ReportLab points at the point of drawing.
The canvas keeps a cursor, advances it after every cell and starts a new page
when a cell would cross the page-break trigger line.
"""

import logging
from io import BytesIO
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional, Tuple, Type, Union

from PIL import Image
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas as pdf_canvas

from ..config import DEFAULT_CONFIG, ConversionConfig
from ..exceptions import RenderWriteError
from .instructions import (
    BorderedCell,
    Instruction,
    LineBreak,
    PlaceImage,
    SetFont,
    SetTextColor,
    TextCell,
)
from .render_utils import resolve_font_name

logger = logging.getLogger(__name__)

# Stroke width of cell borders, in millimetres
BORDER_WIDTH = 0.2
# Text baseline offset below the cell middle, as a fraction of the font size
BASELINE_FACTOR = 0.3


class PdfCanvas:
    """
    Cell-oriented drawing surface producing a PDF document.

    Args:
        config: Layout and behaviour settings
        canvas: Optional pre-built ReportLab canvas; when omitted the canvas
            renders into an in-memory buffer written out by ``output``
    """

    def __init__(self, config: Optional[ConversionConfig] = None, canvas: Optional[pdf_canvas.Canvas] = None):
        self.config = config or DEFAULT_CONFIG
        self.page_width_pt, self.page_height_pt = self.config.page_size_points
        self.page_width = self.page_width_pt / mm
        self.page_height = self.page_height_pt / mm

        self._buffer: Optional[BytesIO] = None
        if canvas is None:
            self._buffer = BytesIO()
            canvas = pdf_canvas.Canvas(
                self._buffer,
                pagesize=(self.page_width_pt, self.page_height_pt),
                invariant=1 if self.config.deterministic_output else 0,
            )
        self.canvas = canvas

        self.x = self.config.margin_left
        self.y = self.config.margin_top
        self.last_height = 0.0
        self.font: Tuple[str, str, float] = (self.config.font_family, "", self.config.default_font_size)
        self.text_color: Tuple[int, int, int] = self.config.default_text_color
        self._finished = False
        self._page_count = 1

        self.instruction_registry: Dict[Type, Callable[[Instruction], None]] = {
            SetFont: lambda ins: self.set_font(ins.family, ins.style, ins.size),
            SetTextColor: lambda ins: self.set_text_color(ins.red, ins.green, ins.blue),
            TextCell: lambda ins: self.text_cell(ins.text, ins.height, ins.align, ins.width),
            BorderedCell: lambda ins: self.bordered_cell(ins.text, ins.width, ins.height, ins.align),
            LineBreak: lambda ins: self.line_break(ins.height),
            PlaceImage: lambda ins: self.place_image(ins.path, ins.x, ins.y, ins.width, ins.height),
        }

        self._apply_graphics_state()

    # ------------------------------------------------------------------
    # Page state
    # ------------------------------------------------------------------
    @property
    def page_count(self) -> int:
        return self._page_count

    @property
    def page_break_trigger(self) -> float:
        return self.page_height - self.config.page_break_margin

    def _apply_graphics_state(self) -> None:
        # showPage() resets the graphics state, so this runs for every page
        family, style, size = self.font
        self.canvas.setFont(resolve_font_name(family, style), size)
        red, green, blue = self.text_color
        self.canvas.setFillColorRGB(red / 255.0, green / 255.0, blue / 255.0)
        self.canvas.setStrokeColorRGB(0, 0, 0)
        self.canvas.setLineWidth(BORDER_WIDTH * mm)

    def add_page(self) -> None:
        self.canvas.showPage()
        self._page_count += 1
        self.y = self.config.margin_top
        self._apply_graphics_state()
        logger.debug(f"Started page {self.page_count}")

    def _break_page_if_needed(self, height: float) -> None:
        if not self.config.auto_page_break:
            return
        if self.y + height > self.page_break_trigger:
            x = self.x
            self.add_page()
            self.x = x

    def _pdf_y(self, y: float) -> float:
        return self.page_height_pt - y * mm

    # ------------------------------------------------------------------
    # Drawing operations
    # ------------------------------------------------------------------
    def set_font(self, family: str, style: str, size: float) -> None:
        self.canvas.setFont(resolve_font_name(family, style), size)
        self.font = (family, style, size)

    def set_text_color(self, red: int, green: int, blue: int) -> None:
        self.canvas.setFillColorRGB(red / 255.0, green / 255.0, blue / 255.0)
        self.text_color = (red, green, blue)

    def _draw_text(self, text: str, x: float, width: float, y: float, height: float, align: str) -> None:
        if not text:
            return
        font_size = self.font[2]
        baseline = y + 0.5 * height + BASELINE_FACTOR * font_size / mm
        pdf_y = self._pdf_y(baseline)
        margin = self.config.cell_margin
        if align == "R":
            self.canvas.drawRightString((x + width - margin) * mm, pdf_y, text)
        elif align == "C":
            self.canvas.drawCentredString((x + width / 2.0) * mm, pdf_y, text)
        else:
            self.canvas.drawString((x + margin) * mm, pdf_y, text)

    def text_cell(self, text: str, height: float, align: str = "L", width: float = 0.0) -> None:
        """
        Borderless cell followed by a new line.

        A width of 0 extends the cell to the right margin.
        """
        self._break_page_if_needed(height)
        if not width:
            width = self.page_width - self.config.margin_right - self.x
        self._draw_text(text, self.x, width, self.y, height, align)
        self.last_height = height
        self.x = self.config.margin_left
        self.y += height

    def bordered_cell(self, text: str, width: float, height: float, align: str = "C") -> None:
        """Framed cell; the cursor moves right by ``width``."""
        self._break_page_if_needed(height)
        self.canvas.rect(
            self.x * mm,
            self._pdf_y(self.y + height),
            width * mm,
            height * mm,
            stroke=1,
            fill=0,
        )
        self._draw_text(text, self.x, width, self.y, height, align)
        self.last_height = height
        self.x += width

    def line_break(self, height: Optional[float] = None) -> None:
        """Return to the left margin and move down; None repeats the last cell height."""
        self.x = self.config.margin_left
        self.y += self.last_height if height is None else height

    def place_image(self, path: Union[str, Path], x: float, y: float, width: float, height: float) -> bool:
        """
        Draw a raster image at an absolute position on the current page.

        Returns:
            True if the image was drawn, False if it was skipped

        Raises:
            RenderWriteError: If the image cannot be decoded and unreadable
                images are not skipped
        """
        try:
            with Image.open(path) as source:
                source.load()
                image = source.copy()
        except OSError as exc:
            if self.config.skip_unreadable_images:
                logger.warning(f"Skipping unreadable image {path}: {exc}")
                return False
            raise RenderWriteError("Cannot decode image", f"{path}: {exc}") from exc

        self.canvas.drawImage(
            ImageReader(image),
            x * mm,
            self._pdf_y(y + height),
            width=width * mm,
            height=height * mm,
            mask="auto",
        )
        return True

    # ------------------------------------------------------------------
    # Instruction execution
    # ------------------------------------------------------------------
    def apply(self, instruction: Instruction) -> None:
        handler = self.instruction_registry.get(type(instruction))
        if handler is None:
            raise TypeError(f"Unsupported render instruction {type(instruction).__name__}")
        handler(instruction)

    def render(self, instructions: Iterable[Instruction]) -> None:
        count = 0
        for instruction in instructions:
            self.apply(instruction)
            count += 1
        logger.debug(f"Rendered {count} instructions on {self.page_count} page(s)")

    def set_document_info(
        self,
        title: Optional[str] = None,
        author: Optional[str] = None,
        subject: Optional[str] = None,
    ) -> None:
        if title:
            self.canvas.setTitle(title)
        if author:
            self.canvas.setAuthor(author)
        if subject:
            self.canvas.setSubject(subject)

    def output(self, path: Union[str, Path]) -> Path:
        """
        Finalise the document and write it to ``path``.

        Raises:
            RenderWriteError: If the document cannot be finalised or written
        """
        target = Path(path)
        if self._finished:
            raise RenderWriteError("Document already written", str(target))
        try:
            self.canvas.save()
            self._finished = True
            if self._buffer is not None:
                target.write_bytes(self._buffer.getvalue())
        except OSError as exc:
            raise RenderWriteError("Failed to write PDF", f"{target}: {exc}") from exc
        logger.info(f"PDF written to {target}")
        return target
