"""
Stream Deck panel driver.

Input Flow
==========

::

    Key press on the device
          ↓
    [streamdeck reader thread]  _on_key_change(deck, key, state)
          ↓
    queue.Queue  (single consumer)
          ↓
    read_events(timeout_ms)  →  [ButtonDownEvent(key) | ButtonUpEvent(key)]
          ↓
    Control loop thread

The library calls back on its own thread; events are only ever consumed
by the control loop, so every state transition runs on one thread in
arrival order.

Output Flow
===========

``set_button_image`` scales and converts the PIL image to the device's
native key format and stages it; ``flush`` writes every staged image.
"""

import logging
from dataclasses import dataclass
from queue import Empty, Queue
from threading import Lock

from StreamDeck.DeviceManager import DeviceManager
from StreamDeck.ImageHelpers import PILHelper
from StreamDeck.Transport.Transport import TransportError

from recdeck.exceptions import PanelError, PanelNotFoundError, PanelReadError

from .protocols import ButtonDownEvent, ButtonUpEvent, PanelDriver, PanelEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PanelInfo:
    """Description of an attached panel."""

    deck_type: str
    serial: str
    key_count: int


class StreamDeckPanel(PanelDriver):
    """PanelDriver backed by a python-elgato-streamdeck device."""

    def __init__(self, deck):
        """
        Wrap a (not yet opened) StreamDeck device.

        Args:
            deck: Device object from DeviceManager().enumerate()
        """
        self._deck = deck
        self._events: Queue[PanelEvent] = Queue()
        self._pending: dict[int, bytes] = {}
        self._pending_lock = Lock()

    # ================================================================
    # LIFECYCLE
    # ================================================================

    def open(self) -> None:
        """Open the device, reset it and start receiving key events."""
        try:
            self._deck.open()
            self._deck.reset()
            self._deck.set_key_callback(self._on_key_change)
        except TransportError as e:
            raise PanelError(
                user_message="Could not open the Stream Deck",
                technical_message=f"Opening {self._deck.deck_type()} failed: {e}",
                recovery_hint="Check that no other application is using the device.",
            ) from e
        logger.info(f"Opened {self._deck.deck_type()} with {self._deck.key_count()} keys")

    def close(self) -> None:
        """Reset and close the device."""
        try:
            with self._deck:
                if self._deck.connected():
                    self._deck.reset()
                self._deck.close()
        except TransportError as e:
            logger.warning(f"Error closing panel: {e}")

    def __enter__(self):
        """Context manager entry."""
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    # ================================================================
    # INPUT
    # ================================================================

    def _on_key_change(self, deck, key: int, state: bool) -> None:
        """Called from the streamdeck reader thread."""
        self._events.put(ButtonDownEvent(key) if state else ButtonUpEvent(key))

    def read_events(self, timeout_ms: int) -> list[PanelEvent]:
        """Wait up to `timeout_ms` for events and drain whatever is queued."""
        if not self._deck.connected():
            raise PanelReadError("device disconnected")

        events: list[PanelEvent] = []
        try:
            events.append(self._events.get(timeout=timeout_ms / 1000))
        except Empty:
            return events

        while True:
            try:
                events.append(self._events.get_nowait())
            except Empty:
                return events

    # ================================================================
    # OUTPUT
    # ================================================================

    def key_count(self) -> int:
        """Number of keys on the device."""
        return self._deck.key_count()

    def set_brightness(self, percent: int) -> None:
        """Set display brightness."""
        with self._deck:
            self._deck.set_brightness(percent)

    def set_button_image(self, key: int, image) -> None:
        """Stage an image for a key."""
        scaled = PILHelper.create_scaled_key_image(self._deck, image, margins=[0, 0, 0, 0])
        native = PILHelper.to_native_key_format(self._deck, scaled)
        with self._pending_lock:
            self._pending[key] = native

    def clear_all_button_images(self) -> None:
        """Stage a blank image for every key."""
        blank = PILHelper.to_native_key_format(self._deck, PILHelper.create_key_image(self._deck))
        with self._pending_lock:
            for key in range(self._deck.key_count()):
                self._pending[key] = blank

    def flush(self) -> None:
        """
        Write staged images to the device.

        Raises:
            PanelError: If the device rejects the write
        """
        with self._pending_lock:
            pending, self._pending = self._pending, {}

        try:
            with self._deck:
                for key, native in pending.items():
                    self._deck.set_key_image(key, native)
        except TransportError as e:
            raise PanelError(
                user_message="Lost connection to the Stream Deck",
                technical_message=f"Writing key images failed: {e}",
            ) from e


# ================================================================
# DISCOVERY
# ================================================================


def discover_panels() -> list[PanelInfo]:
    """List attached Stream Decks."""
    panels = []
    for deck in DeviceManager().enumerate():
        try:
            deck.open()
            try:
                panels.append(PanelInfo(deck.deck_type(), deck.get_serial_number(), deck.key_count()))
            finally:
                deck.close()
        except TransportError as e:
            logger.warning(f"Could not query {deck.deck_type()}: {e}")
    return panels


def open_first_panel(serial: str | None = None) -> StreamDeckPanel:
    """
    Open the first attached Stream Deck, or the one with `serial`.

    Raises:
        PanelNotFoundError: If no matching device is attached
    """
    for deck in DeviceManager().enumerate():
        if not deck.is_visual():
            continue

        # Read the serial without resetting decks we are not going to use
        try:
            deck.open()
            try:
                found = deck.get_serial_number()
            finally:
                deck.close()
        except TransportError as e:
            logger.warning(f"Skipping {deck.deck_type()}: {e}")
            continue

        if serial is not None and found != serial:
            logger.debug(f"Skipping {deck.deck_type()} {found}")
            continue

        panel = StreamDeckPanel(deck)
        try:
            panel.open()
        except PanelError as e:
            logger.warning(f"Skipping {deck.deck_type()} {found}: {e.technical_message}")
            panel.close()
            continue

        logger.info(f"Using {deck.deck_type()} {found}")
        return panel

    raise PanelNotFoundError(serial)
