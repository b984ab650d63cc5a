"""Utilities for reading Open Packaging Convention relationship parts."""

from __future__ import annotations

import posixpath
from typing import Dict, Optional

from ..utils.xml_utils import local_name, parse_xml

RELTYPE_IMAGE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/image"


def parse_relationships(payload: bytes) -> Dict[str, Dict[str, str]]:
    """
    Parse a ``.rels`` part.

    Returns:
        Mapping of relationship id to ``{"target", "type"[, "target_mode"]}``
    """
    relationships: Dict[str, Dict[str, str]] = {}
    root = parse_xml(payload)
    for rel in root.iter():
        if local_name(rel.tag) != "Relationship":
            continue
        rel_id = rel.get("Id", "")
        target = rel.get("Target", "")
        if not rel_id or not target:
            continue
        entry = {"target": target, "type": rel.get("Type", "")}
        target_mode = rel.get("TargetMode")
        if target_mode:
            entry["target_mode"] = target_mode
        relationships[rel_id] = entry
    return relationships


def resolve_target(target: str, base_dir: str = "word") -> Optional[str]:
    """Resolve a relationship target against the source part directory."""
    if not target:
        return None
    if target.startswith("/"):
        return target.lstrip("/")
    return posixpath.normpath(posixpath.join(base_dir, target))


def image_targets(relationships: Dict[str, Dict[str, str]]) -> Dict[str, str]:
    """Map image relationship ids to archive paths, skipping external links."""
    targets = {}
    for rel_id, entry in relationships.items():
        if entry.get("type") != RELTYPE_IMAGE or entry.get("target_mode") == "External":
            continue
        resolved = resolve_target(entry["target"])
        if resolved:
            targets[rel_id] = resolved
    return targets
