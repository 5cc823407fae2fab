"""Panel device protocols and events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from PIL.Image import Image


class PanelEvent:
    """Generic panel event (input from hardware)."""

    pass


@dataclass(frozen=True)
class ButtonDownEvent(PanelEvent):
    """Key was pressed."""

    key: int


@dataclass(frozen=True)
class ButtonUpEvent(PanelEvent):
    """Key was released."""

    key: int


class PanelDriver(Protocol):
    """Protocol for a multi-key panel with per-key images."""

    def read_events(self, timeout_ms: int) -> list[PanelEvent]:
        """
        Wait up to `timeout_ms` for input and return what arrived.

        Returns an empty list on timeout.

        Raises:
            PanelReadError: If the device can no longer be read
        """
        ...

    def set_button_image(self, key: int, image: Image) -> None:
        """Stage an image for a key; it is shown on the next flush()."""
        ...

    def flush(self) -> None:
        """Write all staged images to the device."""
        ...

    def clear_all_button_images(self) -> None:
        """Stage a blank image for every key."""
        ...

    def key_count(self) -> int:
        """Number of keys on the panel."""
        ...

    def set_brightness(self, percent: int) -> None:
        """Set display brightness (0-100)."""
        ...

    def close(self) -> None:
        """Release the device."""
        ...
