"""Key icon images."""

from .store import FALLBACK_COLORS, IconStore, create_fallback_image

__all__ = ["FALLBACK_COLORS", "IconStore", "create_fallback_image"]
