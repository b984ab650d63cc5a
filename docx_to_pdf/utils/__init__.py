"""Helper utilities shared across the converter."""

from .logger import configure_logging, get_logger
from .xml_utils import NAMESPACES, get_attr, local_name, parse_xml

__all__ = [
    "configure_logging",
    "get_logger",
    "NAMESPACES",
    "get_attr",
    "local_name",
    "parse_xml",
]
