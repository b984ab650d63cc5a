"""Document model produced by the extractor and consumed by the render mapper."""

from .content_tree import BlockNode, ContentTree
from .drawing import MEDIA_PREFIX, Drawing
from .paragraph import Alignment, Paragraph
from .run import Run, RunProperties
from .table import Table, TableCell, TableRow

__all__ = [
    "Alignment",
    "BlockNode",
    "ContentTree",
    "Drawing",
    "MEDIA_PREFIX",
    "Paragraph",
    "Run",
    "RunProperties",
    "Table",
    "TableCell",
    "TableRow",
]
