"""Media handling: scoped storage for images extracted from the package."""

from .asset_store import ImageAssetStore

__all__ = ["ImageAssetStore"]
