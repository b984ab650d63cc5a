"""Namespace-agnostic helpers for WordprocessingML elements."""

from __future__ import annotations

from typing import Iterator, Optional

from lxml import etree

NAMESPACES = {
    "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main",
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
    "a": "http://schemas.openxmlformats.org/drawingml/2006/main",
    "wp": "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing",
    "pic": "http://schemas.openxmlformats.org/drawingml/2006/picture",
}

FALSE_TOKENS = {"0", "false", "off", "none"}


def make_parser() -> etree.XMLParser:
    """Parser that never resolves external entities or touches the network."""
    return etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)


def parse_xml(data: bytes) -> etree._Element:
    """Parse XML bytes and return the root element."""
    return etree.fromstring(data, parser=make_parser())


def local_name(tag: object) -> Optional[str]:
    """Return the tag without namespace, or None for comments and PIs."""
    if not isinstance(tag, str):
        return None
    return tag.split("}", 1)[-1]


def iter_children(element: etree._Element, name: str) -> Iterator[etree._Element]:
    """Iterate direct children whose local name matches."""
    for child in element:
        if local_name(child.tag) == name:
            yield child


def find_child(element: Optional[etree._Element], name: str) -> Optional[etree._Element]:
    """Return the first direct child with the given local name."""
    if element is None:
        return None
    return next(iter_children(element, name), None)


def find_descendant(element: etree._Element, name: str) -> Optional[etree._Element]:
    """Return the first descendant (document order) with the given local name."""
    for node in element.iterdescendants():
        if local_name(node.tag) == name:
            return node
    return None


def get_attr(element: Optional[etree._Element], name: str) -> Optional[str]:
    """Read an attribute by local name regardless of its namespace prefix."""
    if element is None:
        return None
    for key, value in element.attrib.items():
        if key.split("}", 1)[-1] == name:
            return value
    return None


def get_value(element: Optional[etree._Element]) -> Optional[str]:
    """Read a property value from ``@val``, falling back to the element text."""
    if element is None:
        return None
    value = get_attr(element, "val")
    if value is None and element.text is not None:
        value = element.text.strip() or None
    return value


def is_toggle_on(element: Optional[etree._Element]) -> bool:
    """Evaluate an OOXML toggle property such as ``<w:b/>`` or ``<w:i w:val="0"/>``."""
    if element is None:
        return False
    value = get_attr(element, "val")
    if value is None:
        return True
    return value.strip().lower() not in FALSE_TOKENS
