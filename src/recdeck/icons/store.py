"""Pre-loaded key icons for each visual state."""

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from recdeck.models import IconConfig, IconState

logger = logging.getLogger(__name__)

DEFAULT_ICON_SIZE = (72, 72)

# Solid colours used when an icon file is missing or unreadable
FALLBACK_COLORS: dict[IconState, tuple[int, int, int]] = {
    IconState.EMPTY: (80, 80, 80),
    IconState.RECORDING: (255, 0, 0),
    IconState.HAS_FILE: (0, 255, 0),
}


def create_fallback_image(
    color: tuple[int, int, int], size: tuple[int, int] = DEFAULT_ICON_SIZE
) -> Image.Image:
    """Create a solid RGB image."""
    return Image.new("RGB", size, color)


class IconStore:
    """
    Holds one decoded image per IconState.

    Images are loaded once at construction; `image_for` never touches the
    filesystem. Scaling to the panel's native key size is left to the
    panel driver.
    """

    def __init__(self, images: dict[IconState, Image.Image]):
        missing = set(IconState) - set(images)
        if missing:
            raise ValueError(f"Missing icons for states: {sorted(s.value for s in missing)}")
        self._images = dict(images)

    @classmethod
    def load(cls, config: IconConfig, size: tuple[int, int] = DEFAULT_ICON_SIZE) -> "IconStore":
        """
        Load icons from disk, falling back to solid colours.

        Args:
            config: Icon file locations
            size: Size of generated fallback images
        """
        images = {}
        for state in IconState:
            path = config.path_for(state)
            images[state] = cls._load_one(path, FALLBACK_COLORS[state], size)
        return cls(images)

    @classmethod
    def fallback(cls, size: tuple[int, int] = DEFAULT_ICON_SIZE) -> "IconStore":
        """Build a store made only of solid-colour icons."""
        return cls({state: create_fallback_image(color, size) for state, color in FALLBACK_COLORS.items()})

    @staticmethod
    def _load_one(path: Path, color: tuple[int, int, int], size: tuple[int, int]) -> Image.Image:
        try:
            with Image.open(path) as im:
                image = im.convert("RGB")
            logger.debug(f"Loaded icon {path}")
            return image
        except (OSError, UnidentifiedImageError) as e:
            logger.warning(f"Using fallback colour {color} for icon {path}: {e}")
            return create_fallback_image(color, size)

    def image_for(self, state: IconState) -> Image.Image:
        """Get the image for a state."""
        return self._images[state]
