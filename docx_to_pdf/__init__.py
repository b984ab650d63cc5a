"""
docx_to_pdf - convert DOCX documents to paginated PDF.

The package reads the WordprocessingML subset that carries plain content:
paragraphs with run formatting (bold, italic, size, color) and alignment,
tables of plain cell text, and embedded raster images. Output is drawn with
ReportLab on fixed-size pages.

Main Components:
- Parser: archive access and document model extraction
- Models: content tree of paragraphs, tables and drawings
- Media: scoped storage of extracted images
- Renderers: render mapper and the ReportLab page canvas
- Utils: logging and XML helpers
"""

from .api import build_instructions, convert, read_content_tree
from .config import DEFAULT_CONFIG, ConversionConfig
from .exceptions import (
    ArchiveOpenError,
    AssetExtractionError,
    DocxToPdfError,
    MalformedMarkup,
    MissingContentPart,
    RenderWriteError,
)
from .models import ContentTree
from .parser import DocumentExtractor, PackageReader
from .renderers import PdfCanvas, RenderMapper
from .utils.logger import configure_logging, get_logger

__version__ = "1.0.0"

__all__ = [
    # High-level API
    "convert",
    "build_instructions",
    "read_content_tree",
    # Configuration
    "ConversionConfig",
    "DEFAULT_CONFIG",
    # Pipeline components
    "PackageReader",
    "DocumentExtractor",
    "ContentTree",
    "RenderMapper",
    "PdfCanvas",
    # Exceptions
    "DocxToPdfError",
    "ArchiveOpenError",
    "MissingContentPart",
    "MalformedMarkup",
    "AssetExtractionError",
    "RenderWriteError",
    # Logging
    "configure_logging",
    "get_logger",
]
