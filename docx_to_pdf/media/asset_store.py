"""
Temporary storage for media extracted from a DOCX package.

The store owns a temporary directory for the lifetime of one conversion and
exposes the image asset map: archive path -> local file path. Closing the
store deletes every extracted file.
"""

import logging
import posixpath
import tempfile
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional

from ..exceptions import AssetExtractionError
from ..models.drawing import MEDIA_PREFIX
from ..parser.package_reader import MediaEntry

logger = logging.getLogger(__name__)


class ImageAssetStore:
    """Writes media entries to a scoped temporary directory."""

    def __init__(self, prefix: str = "docx_images_", base_dir: Optional[Path] = None):
        self._prefix = prefix
        self._base_dir = base_dir
        self._tmp: Optional[tempfile.TemporaryDirectory] = None
        self._assets: Dict[str, Path] = {}

    @property
    def directory(self) -> Path:
        if self._tmp is None:
            raise ValueError("Asset store is not open")
        return Path(self._tmp.name)

    @property
    def asset_map(self) -> Mapping[str, Path]:
        return dict(self._assets)

    def open(self) -> "ImageAssetStore":
        if self._tmp is None:
            try:
                self._tmp = tempfile.TemporaryDirectory(prefix=self._prefix, dir=self._base_dir)
            except OSError as exc:
                raise AssetExtractionError("Cannot create temporary image storage", str(exc)) from exc
            logger.debug(f"Image storage created at {self._tmp.name}")
        return self

    def add(self, entry: MediaEntry) -> Path:
        """Persist one media entry and register it under its archive path."""
        target = self._unique_path(entry.base_name)
        try:
            target.write_bytes(entry.data)
        except OSError as exc:
            raise AssetExtractionError("Failed to write media entry", f"{entry.name}: {exc}") from exc
        self._assets[entry.name] = target
        return target

    def add_all(self, entries: Iterable[MediaEntry]) -> int:
        count = 0
        for entry in entries:
            self.add(entry)
            count += 1
        logger.info(f"Extracted {count} media files")
        return count

    def alias(self, key: str, archive_path: str) -> bool:
        """
        Register ``key`` as another name for an already extracted entry.

        Existing keys are never overwritten.
        """
        if key in self._assets:
            return False
        path = self._assets.get(archive_path)
        if path is None:
            return False
        self._assets[key] = path
        return True

    def alias_relationships(self, image_targets: Mapping[str, str]) -> int:
        """Expose each image relationship id as ``word/media/<id>``."""
        count = 0
        for rel_id, archive_path in image_targets.items():
            if self.alias(MEDIA_PREFIX + rel_id, archive_path):
                count += 1
        logger.debug(f"Registered {count} relationship aliases")
        return count

    def _unique_path(self, base_name: str) -> Path:
        # Entries in different sub-folders may share a base name
        base_name = base_name or "media"
        candidate = self.directory / base_name
        stem, ext = posixpath.splitext(base_name)
        counter = 1
        while candidate.exists():
            candidate = self.directory / f"{stem}_{counter}{ext}"
            counter += 1
        return candidate

    def close(self) -> None:
        if self._tmp is not None:
            self._tmp.cleanup()
            logger.debug(f"Image storage removed: {self._tmp.name}")
            self._tmp = None
        self._assets.clear()

    def __enter__(self) -> "ImageAssetStore":
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
