"""Content tree: the parsed body of the main document part."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Iterator, List, Union

from .drawing import Drawing
from .paragraph import Paragraph
from .table import Table

BlockNode = Union[Paragraph, Table, Drawing]


@dataclass
class ContentTree:
    """Paragraphs, tables and drawings, each tagged with its document position."""

    paragraphs: List[Paragraph] = field(default_factory=list)
    tables: List[Table] = field(default_factory=list)
    drawings: List[Drawing] = field(default_factory=list)

    def add(self, node: BlockNode) -> BlockNode:
        if isinstance(node, Paragraph):
            self.paragraphs.append(node)
        elif isinstance(node, Table):
            self.tables.append(node)
        elif isinstance(node, Drawing):
            self.drawings.append(node)
        else:
            raise TypeError(f"Unsupported node type {type(node).__name__}")
        return node

    def in_document_order(self) -> Iterator[BlockNode]:
        """Yield all nodes interleaved by their recorded position."""
        return heapq.merge(self.paragraphs, self.tables, self.drawings, key=lambda node: node.position)

    def grouped(self) -> Iterator[BlockNode]:
        """Yield all paragraphs, then all tables, then all drawings."""
        yield from self.paragraphs
        yield from self.tables
        yield from self.drawings

    def __len__(self) -> int:
        return len(self.paragraphs) + len(self.tables) + len(self.drawings)

    def is_empty(self) -> bool:
        return len(self) == 0
