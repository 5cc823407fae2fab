"""Panel (Stream Deck) exceptions."""

from .base import RecdeckError


class PanelError(RecdeckError):
    """Panel device error."""
    pass


class PanelNotFoundError(PanelError):
    """No matching panel is attached."""

    def __init__(self, serial: str | None = None):
        """
        Initialize panel not found error.

        Args:
            serial: The requested serial number, if any
        """
        if serial:
            user_msg = f"No Stream Deck with serial '{serial}' was found"
        else:
            user_msg = "No Stream Deck was found"
        super().__init__(
            user_message=user_msg,
            recoverable=True,
            recovery_hint=(
                "Plug in the device and check udev permissions. "
                "Run 'recdeck devices list' to see attached devices."
            ),
        )
        self.serial = serial


class PanelReadError(PanelError):
    """Reading events from the panel failed; the device is assumed disconnected."""

    def __init__(self, original_error: str):
        super().__init__(
            user_message="Lost connection to the Stream Deck",
            technical_message=f"Panel read failed: {original_error}",
            recoverable=False,
        )
        self.original_error = original_error
