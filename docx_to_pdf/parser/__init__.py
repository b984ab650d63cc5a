"""Archive access and WordprocessingML parsing."""

from .package_reader import MediaEntry, PackageReader
from .relationships import image_targets, parse_relationships
from .xml_parser import DocumentExtractor, parse_document

__all__ = [
    "DocumentExtractor",
    "MediaEntry",
    "PackageReader",
    "image_targets",
    "parse_document",
    "parse_relationships",
]
