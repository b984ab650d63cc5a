"""Drawing model for DOCX documents."""

from __future__ import annotations

from dataclasses import dataclass

MEDIA_PREFIX = "word/media/"


@dataclass(frozen=True)
class Drawing:
    """Reference to an image asset by its ``blip`` embed identifier."""

    position: int
    embed_id: str

    def __post_init__(self) -> None:
        if not self.embed_id:
            raise ValueError("Drawing embed identifier must be a non-empty string")

    @property
    def asset_key(self) -> str:
        """Key under which the image is looked up in the asset map."""
        return MEDIA_PREFIX + self.embed_id
