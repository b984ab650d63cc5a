"""
Table model for DOCX documents.

Only plain cell text is modelled: each cell keeps the first text fragment of
its first run. Nested formatting and nested tables are discarded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class TableCell:
    text: str = ""


@dataclass
class TableRow:
    cells: List[TableCell] = field(default_factory=list)

    def get_texts(self) -> List[str]:
        return [cell.text for cell in self.cells]


@dataclass
class Table:
    """Represents a table with rows and cells."""

    position: int
    rows: List[TableRow] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return max((len(row.cells) for row in self.rows), default=0)
