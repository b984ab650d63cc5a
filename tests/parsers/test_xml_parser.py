"""
Tests for DocumentExtractor.

Covers paragraph, run, table and drawing extraction from document markup.
"""

import pytest
from lxml import etree

from docx_to_pdf.exceptions import MalformedMarkup
from docx_to_pdf.models import Alignment, Drawing, Paragraph, Table
from docx_to_pdf.parser.xml_parser import DocumentExtractor, parse_document
from tests.docx_builders import drawing_xml, wrap_body


def parse_body(body_xml):
    return parse_document(wrap_body(body_xml).encode("utf-8"))


@pytest.fixture
def extractor():
    return DocumentExtractor()


class TestParagraphs:
    """Paragraph and run extraction."""

    def test_plain_paragraph(self):
        tree = parse_body("<w:p><w:r><w:t>Hello</w:t></w:r><w:r><w:t>World</w:t></w:r></w:p>")

        assert len(tree.paragraphs) == 1
        paragraph = tree.paragraphs[0]
        assert paragraph.alignment == Alignment.LEFT
        assert [run.texts for run in paragraph.runs] == [["Hello"], ["World"]]
        assert paragraph.get_text() == "HelloWorld"

    def test_run_keeps_every_text_fragment(self):
        tree = parse_body("<w:p><w:r><w:t>one</w:t><w:tab/><w:t>two</w:t><w:t/></w:r></w:p>")
        assert tree.paragraphs[0].runs[0].texts == ["one", "two", ""]

    def test_whitespace_is_preserved(self):
        tree = parse_body('<w:p><w:r><w:t xml:space="preserve">Hello, </w:t></w:r></w:p>')
        assert tree.paragraphs[0].runs[0].texts == ["Hello, "]

    @pytest.mark.parametrize(
        "jc, expected",
        [
            ("center", Alignment.CENTER),
            ("right", Alignment.RIGHT),
            ("left", Alignment.LEFT),
            ("both", Alignment.LEFT),
            ("end", Alignment.LEFT),
        ],
    )
    def test_alignment(self, jc, expected):
        tree = parse_body(f'<w:p><w:pPr><w:jc w:val="{jc}"/></w:pPr><w:r><w:t>x</w:t></w:r></w:p>')
        assert tree.paragraphs[0].alignment == expected

    def test_run_properties(self):
        tree = parse_body(
            "<w:p><w:r><w:rPr><w:b/><w:i/><w:sz w:val=\"28\"/><w:color w:val=\"FF0000\"/></w:rPr>"
            "<w:t>styled</w:t></w:r></w:p>"
        )
        props = tree.paragraphs[0].runs[0].properties
        assert props.bold is True
        assert props.italic is True
        assert props.font_size == "28"
        assert props.color == "FF0000"

    def test_property_values_as_element_text(self):
        tree = parse_body(
            "<w:p><w:pPr><w:jc>center</w:jc></w:pPr>"
            "<w:r><w:rPr><w:sz> 28 </w:sz><w:color>FF0000</w:color></w:rPr><w:t>x</w:t></w:r></w:p>"
        )
        paragraph = tree.paragraphs[0]
        assert paragraph.alignment == Alignment.CENTER
        assert paragraph.runs[0].properties.font_size == "28"
        assert paragraph.runs[0].properties.color == "FF0000"

    def test_val_attribute_wins_over_element_text(self):
        tree = parse_body(
            "<w:p><w:r><w:rPr><w:sz w:val=\"40\">28</w:sz><w:color/></w:rPr><w:t>x</w:t></w:r></w:p>"
        )
        props = tree.paragraphs[0].runs[0].properties
        assert props.font_size == "40"
        assert props.color is None

    def test_absent_properties_are_none(self):
        tree = parse_body("<w:p><w:r><w:t>plain</w:t></w:r></w:p>")
        props = tree.paragraphs[0].runs[0].properties
        assert props.bold is False
        assert props.italic is False
        assert props.font_size is None
        assert props.color is None

    @pytest.mark.parametrize("value", ["0", "false", "off"])
    def test_toggle_switched_off(self, value):
        tree = parse_body(
            f'<w:p><w:r><w:rPr><w:b w:val="{value}"/><w:i w:val="{value}"/></w:rPr><w:t>x</w:t></w:r></w:p>'
        )
        props = tree.paragraphs[0].runs[0].properties
        assert props.bold is False
        assert props.italic is False

    def test_hyperlink_runs_are_included(self):
        tree = parse_body(
            "<w:p><w:r><w:t>see </w:t></w:r>"
            '<w:hyperlink r:id="rId9"><w:r><w:t>link</w:t></w:r></w:hyperlink></w:p>'
        )
        assert tree.paragraphs[0].get_text() == "see link"

    def test_empty_paragraph(self):
        tree = parse_body("<w:p/>")
        assert len(tree.paragraphs) == 1
        assert tree.paragraphs[0].runs == []

    def test_unprefixed_markup(self):
        tree = parse_document(
            b'<document><body><p><pPr><jc val="right"/></pPr>'
            b'<r><rPr><b/></rPr><t>bare</t></r></p></body></document>'
        )
        paragraph = tree.paragraphs[0]
        assert paragraph.alignment == Alignment.RIGHT
        assert paragraph.runs[0].properties.bold is True
        assert paragraph.runs[0].texts == ["bare"]


class TestTables:
    """Table extraction."""

    def test_two_by_two_table(self):
        rows = "".join(
            "<w:tr>"
            + "".join(f"<w:tc><w:p><w:r><w:t>{text}</w:t></w:r></w:p></w:tc>" for text in pair)
            + "</w:tr>"
            for pair in (("A", "B"), ("C", "D"))
        )
        tree = parse_body(f"<w:tbl>{rows}</w:tbl>")

        assert len(tree.tables) == 1
        table = tree.tables[0]
        assert [row.get_texts() for row in table.rows] == [["A", "B"], ["C", "D"]]
        assert table.column_count == 2

    def test_cell_keeps_first_fragment_only(self):
        tree = parse_body(
            "<w:tbl><w:tr><w:tc>"
            "<w:p><w:r><w:t>first</w:t><w:t>second</w:t></w:r><w:r><w:t>third</w:t></w:r></w:p>"
            "<w:p><w:r><w:t>other paragraph</w:t></w:r></w:p>"
            "</w:tc></w:tr></w:tbl>"
        )
        assert tree.tables[0].rows[0].get_texts() == ["first"]

    @pytest.mark.parametrize(
        "cell",
        [
            "<w:p><w:r><w:tab/></w:r><w:r><w:t>A</w:t></w:r></w:p>",
            "<w:p><w:r><w:rPr><w:b/></w:rPr></w:r><w:r><w:t>A</w:t></w:r></w:p>",
            "<w:p/><w:p><w:r><w:br/></w:r></w:p><w:p><w:r><w:t>A</w:t></w:r></w:p>",
        ],
    )
    def test_cell_text_skips_runs_without_text(self, cell):
        tree = parse_body(f"<w:tbl><w:tr><w:tc>{cell}</w:tc></w:tr></w:tbl>")
        assert tree.tables[0].rows[0].get_texts() == ["A"]

    def test_empty_cell(self):
        tree = parse_body("<w:tbl><w:tr><w:tc><w:tcPr/><w:p/></w:tc></w:tr></w:tbl>")
        assert tree.tables[0].rows[0].get_texts() == [""]


class TestDrawings:
    """Drawing extraction."""

    def test_body_drawing(self):
        tree = parse_body(drawing_xml("rId5"))
        assert tree.drawings == [Drawing(position=0, embed_id="rId5")]

    def test_drawing_without_embed_is_skipped(self):
        tree = parse_body("<w:drawing><wp:inline/></w:drawing>")
        assert tree.drawings == []

    def test_inline_drawing_follows_its_paragraph(self):
        tree = parse_body(
            f"<w:p><w:r><w:t>caption</w:t></w:r><w:r>{drawing_xml('rId3')}</w:r></w:p>"
            "<w:p><w:r><w:t>after</w:t></w:r></w:p>"
        )
        assert [p.position for p in tree.paragraphs] == [0, 2]
        assert tree.drawings == [Drawing(position=1, embed_id="rId3")]


class TestDocumentStructure:
    """Body traversal and error handling."""

    def test_positions_follow_document_order(self):
        tree = parse_body(
            "<w:p><w:r><w:t>one</w:t></w:r></w:p>"
            "<w:tbl><w:tr><w:tc><w:p><w:r><w:t>cell</w:t></w:r></w:p></w:tc></w:tr></w:tbl>"
            + drawing_xml("rId1")
            + "<w:p><w:r><w:t>two</w:t></w:r></w:p>"
        )
        ordered = list(tree.in_document_order())
        assert [type(node) for node in ordered] == [Paragraph, Table, Drawing, Paragraph]
        assert [node.position for node in ordered] == [0, 1, 2, 3]

    def test_section_properties_and_unknown_elements_are_skipped(self):
        tree = parse_body(
            "<w:bookmarkStart w:id=\"0\"/><w:p><w:r><w:t>x</w:t></w:r></w:p><w:sectPr/>"
        )
        assert len(tree) == 1

    def test_structured_document_tag_content_is_parsed(self):
        tree = parse_body(
            "<w:sdt><w:sdtPr/><w:sdtContent>"
            "<w:p><w:r><w:t>inside</w:t></w:r></w:p>"
            "</w:sdtContent></w:sdt>"
        )
        assert tree.paragraphs[0].get_text() == "inside"

    def test_missing_body_gives_empty_tree(self):
        tree = parse_document(b'<w:document xmlns:w="urn:x"/>')
        assert tree.is_empty()

    def test_malformed_markup(self, extractor):
        with pytest.raises(MalformedMarkup) as exc_info:
            extractor.parse(b"<document><body><p></body>")
        assert isinstance(exc_info.value.__cause__, etree.XMLSyntaxError)

    def test_extractor_is_reusable(self, extractor):
        xml = wrap_body("<w:p><w:r><w:t>x</w:t></w:r></w:p>").encode("utf-8")
        first = extractor.parse(xml)
        second = extractor.parse(xml)
        assert first == second
        assert second.paragraphs[0].position == 0
