"""
Document model extractor.

Turns the markup of ``word/document.xml`` into a ``ContentTree`` of paragraphs,
tables and drawings. Elements are matched by local name, so both prefixed
WordprocessingML and unprefixed markup are accepted.
"""

import logging
from typing import Callable, Dict, Iterator, List, Optional

from lxml import etree

from ..exceptions import MalformedMarkup
from ..models import (
    Alignment,
    ContentTree,
    Drawing,
    Paragraph,
    Run,
    RunProperties,
    Table,
    TableCell,
    TableRow,
)
from ..utils.xml_utils import (
    find_child,
    find_descendant,
    get_attr,
    get_value,
    is_toggle_on,
    iter_children,
    local_name,
    parse_xml,
)

logger = logging.getLogger(__name__)


class DocumentExtractor:
    """
    Parses the main content part into a ``ContentTree``.

    Body children are dispatched through a tag registry; every node receives
    the next document position so the render mapper can interleave them.
    """

    # Body-level wrappers whose content is parsed in place
    TRANSPARENT_TAGS = {"sdt": "sdtContent"}

    def __init__(self) -> None:
        self.parser_registry: Dict[str, Callable[[etree._Element, ContentTree], None]] = {
            "p": self._parse_paragraph,
            "tbl": self._parse_table,
            "drawing": self._parse_body_drawing,
        }
        self._position = 0

    def parse(self, xml_bytes: bytes) -> ContentTree:
        """
        Parse document markup.

        Args:
            xml_bytes: Raw bytes of the main content part

        Returns:
            ContentTree with every supported body element

        Raises:
            MalformedMarkup: If the bytes are not well-formed XML
        """
        try:
            root = parse_xml(xml_bytes)
        except etree.XMLSyntaxError as exc:
            raise MalformedMarkup("Main document part is not well-formed", str(exc)) from exc

        tree = ContentTree()
        self._position = 0

        body = root if local_name(root.tag) == "body" else find_child(root, "body")
        if body is None:
            logger.warning("No body element found in document")
            return tree

        self._parse_container(body, tree)
        logger.info(
            f"Parsed {len(tree.paragraphs)} paragraphs, {len(tree.tables)} tables, "
            f"{len(tree.drawings)} drawings"
        )
        return tree

    def _parse_container(self, container: etree._Element, tree: ContentTree) -> None:
        for child in container:
            tag = local_name(child.tag)
            if tag is None:
                continue
            if tag in self.TRANSPARENT_TAGS:
                content = find_child(child, self.TRANSPARENT_TAGS[tag])
                if content is not None:
                    self._parse_container(content, tree)
                continue
            parser_func = self.parser_registry.get(tag)
            if parser_func is None:
                logger.debug(f"Skipping unsupported body element: {tag}")
                continue
            parser_func(child, tree)

    def _next_position(self) -> int:
        position = self._position
        self._position += 1
        return position

    # ------------------------------------------------------------------
    # Paragraphs

    def _parse_paragraph(self, p_node: etree._Element, tree: ContentTree) -> None:
        p_pr = find_child(p_node, "pPr")
        alignment = Alignment.from_value(get_value(find_child(p_pr, "jc")))
        paragraph = Paragraph(position=self._next_position(), alignment=alignment)

        inline_drawings: List[str] = []
        for r_node in self._iter_runs(p_node):
            paragraph.runs.append(self.parse_run(r_node))
            for drawing_node in iter_children(r_node, "drawing"):
                embed_id = self._embed_id(drawing_node)
                if embed_id:
                    inline_drawings.append(embed_id)

        tree.add(paragraph)
        for embed_id in inline_drawings:
            tree.add(Drawing(position=self._next_position(), embed_id=embed_id))

    def _iter_runs(self, p_node: etree._Element) -> Iterator[etree._Element]:
        for child in p_node:
            tag = local_name(child.tag)
            if tag == "r":
                yield child
            elif tag == "hyperlink":
                yield from iter_children(child, "r")

    def parse_run(self, r_node: etree._Element) -> Run:
        """Parse a ``w:r`` element into a Run."""
        texts = [t_node.text or "" for t_node in iter_children(r_node, "t")]
        return Run(properties=self.parse_run_properties(find_child(r_node, "rPr")), texts=texts)

    def parse_run_properties(self, rpr_node: Optional[etree._Element]) -> RunProperties:
        """Read bold, italic, size and color; absent values stay None."""
        if rpr_node is None:
            return RunProperties()
        return RunProperties(
            bold=is_toggle_on(find_child(rpr_node, "b")),
            italic=is_toggle_on(find_child(rpr_node, "i")),
            font_size=get_value(find_child(rpr_node, "sz")),
            color=get_value(find_child(rpr_node, "color")),
        )

    # ------------------------------------------------------------------
    # Tables

    def _parse_table(self, tbl_node: etree._Element, tree: ContentTree) -> None:
        table = Table(position=self._next_position())
        for tr_node in iter_children(tbl_node, "tr"):
            row = TableRow()
            for tc_node in iter_children(tr_node, "tc"):
                row.cells.append(TableCell(text=self._first_cell_text(tc_node)))
            table.rows.append(row)
        tree.add(table)

    def _first_cell_text(self, tc_node: etree._Element) -> str:
        # First t reached through p > r > t, in document order
        for p_node in iter_children(tc_node, "p"):
            for r_node in iter_children(p_node, "r"):
                t_node = find_child(r_node, "t")
                if t_node is not None:
                    return t_node.text or ""
        return ""

    # ------------------------------------------------------------------
    # Drawings

    def _parse_body_drawing(self, drawing_node: etree._Element, tree: ContentTree) -> None:
        embed_id = self._embed_id(drawing_node)
        if not embed_id:
            logger.debug("Skipping drawing without embed identifier")
            return
        tree.add(Drawing(position=self._next_position(), embed_id=embed_id))

    def _embed_id(self, drawing_node: etree._Element) -> Optional[str]:
        blip = find_descendant(drawing_node, "blip")
        embed_id = get_attr(blip, "embed")
        if embed_id:
            embed_id = embed_id.strip()
        return embed_id or None


def parse_document(xml_bytes: bytes) -> ContentTree:
    """Convenience wrapper around ``DocumentExtractor().parse``."""
    return DocumentExtractor().parse(xml_bytes)
