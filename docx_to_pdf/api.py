"""
High-level conversion API.

Example:
    >>> from docx_to_pdf import convert
    >>>
    >>> convert("report.docx", "report.pdf")
    >>>
    >>> # Letter paper, tables and images in their own groups
    >>> convert("report.docx", "report.pdf",
    ...         config={"page_size": "LETTER", "preserve_document_order": False})
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Mapping, Union

from .config import DEFAULT_CONFIG, ConversionConfig
from .media import ImageAssetStore
from .models import ContentTree
from .parser import DocumentExtractor, PackageReader, image_targets
from .renderers import Instruction, PdfCanvas, RenderMapper

logger = logging.getLogger(__name__)

__all__ = ["build_instructions", "convert", "read_content_tree"]

ConfigLike = Union[ConversionConfig, Mapping[str, Any], None]


def _resolve_config(config: ConfigLike) -> ConversionConfig:
    if config is None:
        return DEFAULT_CONFIG
    if isinstance(config, ConversionConfig):
        return config
    return ConversionConfig.from_options(config)


def _collect_assets(reader: PackageReader, store: ImageAssetStore, config: ConversionConfig) -> None:
    store.add_all(reader.iter_media())
    if config.resolve_relationships:
        store.alias_relationships(image_targets(reader.get_relationships()))


def read_content_tree(input_path: Union[str, Path]) -> ContentTree:
    """Open a DOCX package and parse its main content part."""
    with PackageReader(input_path) as reader:
        return DocumentExtractor().parse(reader.get_document_xml())


def build_instructions(input_path: Union[str, Path], config: ConfigLike = None) -> List[Instruction]:
    """
    Map a DOCX package to render instructions without drawing anything.

    Image paths in the returned ``PlaceImage`` instructions point into
    temporary storage that no longer exists when this function returns.
    """
    config = _resolve_config(config)
    with PackageReader(input_path) as reader:
        tree = DocumentExtractor().parse(reader.get_document_xml())
        with ImageAssetStore() as store:
            _collect_assets(reader, store, config)
            return RenderMapper(config).map(tree, store.asset_map)


def convert(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    config: ConfigLike = None,
) -> Path:
    """
    Convert a DOCX file to PDF.

    Args:
        input_path: Path to the ``.docx`` package
        output_path: Path of the PDF to write
        config: ``ConversionConfig`` or a mapping of its option names

    Returns:
        Path: Path of the written PDF

    Raises:
        ArchiveOpenError: Input missing, unreadable or not a ZIP archive
        MissingContentPart: No ``word/document.xml`` in the package
        MalformedMarkup: The main content part is not well-formed XML
        AssetExtractionError: A media entry could not be extracted
        RenderWriteError: The PDF could not be written
        ValueError: Invalid configuration options
    """
    config = _resolve_config(config)
    logger.info(f"Converting {input_path} -> {output_path}")

    with PackageReader(input_path) as reader:
        tree = DocumentExtractor().parse(reader.get_document_xml())
        properties = reader.get_core_properties()

        with ImageAssetStore() as store:
            _collect_assets(reader, store, config)
            instructions = RenderMapper(config).map(tree, store.asset_map)

            canvas = PdfCanvas(config)
            canvas.set_document_info(
                title=properties.get("title"),
                author=properties.get("creator"),
                subject=properties.get("subject"),
            )
            canvas.render(instructions)
            result = canvas.output(output_path)

    logger.info(f"Conversion finished: {canvas.page_count} page(s), {len(instructions)} instructions")
    return result
