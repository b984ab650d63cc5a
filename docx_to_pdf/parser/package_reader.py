"""
Package reader for DOCX files.

Opens the ZIP container and gives access to the main content part, the media
entries and the package metadata parts.
"""

import logging
import posixpath
import zipfile
import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from lxml import etree

from ..exceptions import ArchiveOpenError, AssetExtractionError, MissingContentPart
from ..models.drawing import MEDIA_PREFIX
from ..utils.xml_utils import local_name, parse_xml
from .relationships import parse_relationships

logger = logging.getLogger(__name__)

DOCUMENT_XML_PATH = "word/document.xml"
DOCUMENT_RELS_PATH = "word/_rels/document.xml.rels"
CORE_PROPS_PATH = "docProps/core.xml"

CORE_PROPERTY_NAMES = ("title", "subject", "creator", "description", "keywords")


@dataclass(frozen=True)
class MediaEntry:
    """A binary asset stored under ``word/media/``."""

    name: str
    data: bytes

    @property
    def base_name(self) -> str:
        return posixpath.basename(self.name)


class PackageReader:
    """
    Reads DOCX package contents.

    Use as a context manager so the underlying ZIP handle is always closed.
    """

    def __init__(self, docx_path: Union[str, Path]):
        self.docx_path = Path(docx_path)
        self._zip_file: Optional[zipfile.ZipFile] = None
        self._open_package()

    def _open_package(self) -> None:
        if not self.docx_path.is_file():
            raise ArchiveOpenError("DOCX file not found", str(self.docx_path))
        try:
            self._zip_file = zipfile.ZipFile(self.docx_path, "r")
        except zipfile.BadZipFile as exc:
            raise ArchiveOpenError("Not a valid ZIP archive", str(self.docx_path)) from exc
        except OSError as exc:
            raise ArchiveOpenError("Cannot open DOCX package", f"{self.docx_path}: {exc}") from exc
        logger.info(f"Opened DOCX package: {self.docx_path}")

    @property
    def zip_file(self) -> zipfile.ZipFile:
        if self._zip_file is None:
            raise ValueError("Package not opened")
        return self._zip_file

    @property
    def closed(self) -> bool:
        return self._zip_file is None

    def has_part(self, part_name: str) -> bool:
        return part_name in self.zip_file.namelist()

    def get_binary_content(self, part_name: str) -> Optional[bytes]:
        """
        Get binary content for a given part name.

        Returns:
            Part bytes, or None if the part does not exist
        """
        if not self.has_part(part_name):
            logger.debug(f"Part not found: {part_name}")
            return None
        return self.zip_file.read(part_name)

    def get_document_xml(self) -> bytes:
        """Return the raw bytes of ``word/document.xml``."""
        if not self.has_part(DOCUMENT_XML_PATH):
            raise MissingContentPart("Main document part missing from package", DOCUMENT_XML_PATH)
        try:
            return self.zip_file.read(DOCUMENT_XML_PATH)
        except (zipfile.BadZipFile, zlib.error, OSError) as exc:
            raise ArchiveOpenError("Cannot read main document part", str(exc)) from exc

    def get_media_files(self) -> List[str]:
        """List every file entry under ``word/media/``."""
        return [
            info.filename
            for info in self.zip_file.infolist()
            if info.filename.startswith(MEDIA_PREFIX) and not info.is_dir()
        ]

    def iter_media(self) -> Iterator[MediaEntry]:
        """Yield media entries with their bytes. Order is not guaranteed."""
        for name in self.get_media_files():
            try:
                data = self.zip_file.read(name)
            except (zipfile.BadZipFile, zlib.error, OSError, RuntimeError) as exc:
                raise AssetExtractionError("Failed to read media entry", f"{name}: {exc}") from exc
            yield MediaEntry(name=name, data=data)

    def get_relationships(self, rels_part: str = DOCUMENT_RELS_PATH) -> Dict[str, Dict[str, str]]:
        """Relationships of the main part keyed by id; empty when absent or unreadable."""
        payload = self.get_binary_content(rels_part)
        if payload is None:
            return {}
        try:
            return parse_relationships(payload)
        except etree.XMLSyntaxError as exc:
            logger.warning(f"Ignoring malformed relationship part {rels_part}: {exc}")
            return {}

    def get_core_properties(self) -> Dict[str, str]:
        """Dublin Core properties from ``docProps/core.xml`` (title, creator, ...)."""
        payload = self.get_binary_content(CORE_PROPS_PATH)
        if payload is None:
            return {}
        try:
            root = parse_xml(payload)
        except etree.XMLSyntaxError as exc:
            logger.warning(f"Ignoring malformed core properties: {exc}")
            return {}
        props = {}
        for element in root:
            name = local_name(element.tag)
            if name in CORE_PROPERTY_NAMES and element.text and element.text.strip():
                props[name] = element.text.strip()
        return props

    def __enter__(self) -> "PackageReader":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the package reader."""
        if self._zip_file is not None:
            self._zip_file.close()
            self._zip_file = None
            logger.debug("Package reader closed")
