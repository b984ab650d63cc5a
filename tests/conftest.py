"""
Pytest configuration for docx_to_pdf
"""

import io
import logging
import sys
import zipfile
from pathlib import Path

import pytest
from PIL import Image

from tests.docx_builders import IMAGE_REL_TYPE, rels_xml, wrap_body


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(message)s"))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    import tempfile

    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def png_bytes():
    """A small red PNG generated with Pillow."""
    buffer = io.BytesIO()
    Image.new("RGB", (8, 8), (255, 0, 0)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def make_docx(temp_dir):
    """
    Factory writing a DOCX package from a ``{entry name: content}`` mapping.

    ``body`` is wrapped into ``word/document.xml`` unless raw ``document``
    markup is given; ``body=None`` leaves the main content part out.
    """
    counter = {"value": 0}

    def _make(body="", entries=None, document=..., name=None):
        counter["value"] += 1
        path = temp_dir / (name or f"doc_{counter['value']}.docx")
        files = {}
        if document is ...:
            if body is not None:
                files["word/document.xml"] = wrap_body(body)
        elif document is not None:
            files["word/document.xml"] = document
        files.update(entries or {})
        with zipfile.ZipFile(path, "w") as zf:
            for entry_name, content in files.items():
                zf.writestr(entry_name, content)
        return path

    return _make


@pytest.fixture
def sample_zip_content(png_bytes):
    """Minimal package with one paragraph, one image and its relationship."""
    return {
        "[Content_Types].xml": (
            '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
            '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
            '<Default Extension="png" ContentType="image/png"/>'
            '<Default Extension="xml" ContentType="application/xml"/>'
            "</Types>"
        ),
        "word/document.xml": wrap_body("<w:p><w:r><w:t>Test paragraph</w:t></w:r></w:p>"),
        "word/_rels/document.xml.rels": rels_xml([("rId7", IMAGE_REL_TYPE, "media/image1.png")]),
        "word/media/image1.png": png_bytes,
        "docProps/core.xml": (
            '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
            '<cp:coreProperties xmlns:cp="http://schemas.openxmlformats.org/package/2006/metadata/core-properties" '
            'xmlns:dc="http://purl.org/dc/elements/1.1/">'
            "<dc:title>Quarterly Report</dc:title>"
            "<dc:creator>Finance Team</dc:creator>"
            "</cp:coreProperties>"
        ),
    }


@pytest.fixture
def sample_docx(temp_dir, sample_zip_content):
    docx_path = temp_dir / "sample.docx"
    with zipfile.ZipFile(docx_path, "w") as zf:
        for filename, content in sample_zip_content.items():
            zf.writestr(filename, content)
    return docx_path


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
