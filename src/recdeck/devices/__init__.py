"""Panel device drivers.

The Stream Deck driver is imported lazily by callers (see
recdeck.devices.streamdeck) so that code and tests that only need the
protocol don't require the HID backend.
"""

from .protocols import ButtonDownEvent, ButtonUpEvent, PanelDriver, PanelEvent

__all__ = ["ButtonDownEvent", "ButtonUpEvent", "PanelDriver", "PanelEvent"]
