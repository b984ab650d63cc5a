"""
Render mapper.

Turns a ``ContentTree`` and the image asset map into an ordered list of render
instructions. The mapper is pure: it never touches the canvas or the file
system, so its output can be inspected and compared directly.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Type

from ..config import DEFAULT_CONFIG, ConversionConfig
from ..models import BlockNode, ContentTree, Drawing, Paragraph, Run, Table
from .instructions import (
    BorderedCell,
    Instruction,
    LineBreak,
    PlaceImage,
    SetFont,
    SetTextColor,
    TextCell,
)
from .render_utils import alignment_code, font_style, resolve_font_size, resolve_text_color

logger = logging.getLogger(__name__)


class RenderMapper:
    """
    Maps document nodes to render instructions.

    Nodes are dispatched through a type registry, the same way the parser
    dispatches body elements by tag.
    """

    def __init__(self, config: Optional[ConversionConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.node_registry: Dict[Type, Callable[[BlockNode, Mapping[str, Path]], List[Instruction]]] = {
            Paragraph: self.map_paragraph,
            Table: self.map_table,
            Drawing: self.map_drawing,
        }

    def map(self, tree: ContentTree, assets: Optional[Mapping[str, Path]] = None) -> List[Instruction]:
        """
        Produce the instruction stream for a document.

        Args:
            tree: Parsed content tree
            assets: Image asset map (archive path -> local file)

        Returns:
            Instructions in rendering order
        """
        assets = assets or {}
        instructions: List[Instruction] = []
        for node in self._ordered_nodes(tree):
            handler = self.node_registry[type(node)]
            instructions.extend(handler(node, assets))
        logger.debug(f"Mapped {len(tree)} nodes to {len(instructions)} instructions")
        return instructions

    def _ordered_nodes(self, tree: ContentTree) -> Iterable[BlockNode]:
        if self.config.preserve_document_order:
            return tree.in_document_order()
        return tree.grouped()

    def map_paragraph(self, paragraph: Paragraph, assets: Optional[Mapping[str, Path]] = None) -> List[Instruction]:
        align = alignment_code(paragraph.alignment)
        instructions: List[Instruction] = []
        for run in paragraph.runs:
            if not run.texts:
                continue
            instructions.append(self._run_font(run))
            instructions.append(self._run_color(run))
            for text in run.texts:
                instructions.append(TextCell(text=text, height=self.config.line_height, align=align))
        instructions.append(LineBreak(self.config.paragraph_spacing))
        return instructions

    def _run_font(self, run: Run) -> SetFont:
        props = run.properties
        return SetFont(
            family=self.config.font_family,
            style=font_style(props.bold, props.italic),
            size=resolve_font_size(props.font_size, self.config.default_font_size),
        )

    def _run_color(self, run: Run) -> SetTextColor:
        red, green, blue = resolve_text_color(run.properties.color, self.config.default_text_color)
        return SetTextColor(red, green, blue)

    def map_table(self, table: Table, assets: Optional[Mapping[str, Path]] = None) -> List[Instruction]:
        config = self.config
        red, green, blue = config.default_text_color
        instructions: List[Instruction] = [
            SetFont(family=config.font_family, style="", size=config.table_font_size),
            SetTextColor(red, green, blue),
        ]
        for row in table.rows:
            for text in row.get_texts():
                instructions.append(
                    BorderedCell(
                        text=text,
                        width=config.table_cell_width,
                        height=config.table_cell_height,
                        align="C",
                    )
                )
            instructions.append(LineBreak(None))
        return instructions

    def map_drawing(self, drawing: Drawing, assets: Mapping[str, Path]) -> List[Instruction]:
        key = drawing.asset_key
        path = assets.get(key)
        if path is None:
            logger.debug(f"No image asset for drawing {drawing.embed_id}, skipping")
            return []
        config = self.config
        return [
            PlaceImage(
                asset_key=key,
                path=Path(path),
                x=config.image_x,
                y=config.image_y,
                width=config.image_width,
                height=config.image_height,
            )
        ]


def map_tree(
    tree: ContentTree,
    assets: Optional[Mapping[str, Path]] = None,
    config: Optional[ConversionConfig] = None,
) -> List[Instruction]:
    """Convenience wrapper around ``RenderMapper(config).map``."""
    return RenderMapper(config).map(tree, assets)
