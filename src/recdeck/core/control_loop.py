"""Sequential panel event loop."""

import logging
import threading

from recdeck.devices import PanelDriver
from recdeck.exceptions import PanelError

from .state_machine import ButtonStateMachine

logger = logging.getLogger(__name__)


class ControlLoop:
    """
    Feeds panel events to the button state machine one at a time.

    Lifecycle:
    1. Set brightness and blank every key
    2. Render the initial icon of every bound key
    3. Read and dispatch events until the exit key is released, stop()
       is called, or the panel fails
    4. Blank every key again (always, even after a panel failure)
    """

    def __init__(
        self,
        panel: PanelDriver,
        machine: ButtonStateMachine,
        read_timeout_ms: int = 100,
        brightness: int | None = 50,
    ):
        """
        Initialize the loop.

        Args:
            panel: Panel to read events from
            machine: State machine that handles each event
            read_timeout_ms: How long each read waits for events
            brightness: Brightness to set at startup (None leaves it alone)
        """
        self.panel = panel
        self.machine = machine
        self.read_timeout_ms = read_timeout_ms
        self.brightness = brightness
        self._stop_requested = threading.Event()

    def stop(self) -> None:
        """Ask the loop to finish after the current read."""
        self._stop_requested.set()

    def run(self) -> None:
        """
        Run until the exit gesture, stop(), or a panel failure.

        Raises:
            PanelError: If the panel fails; the keys are still blanked first
        """
        if self.brightness is not None:
            self.panel.set_brightness(self.brightness)
        self.panel.clear_all_button_images()
        self.machine.render_initial()

        try:
            self._loop()
        finally:
            self._cleanup()

    def _loop(self) -> None:
        logger.info("Control loop started")
        while not self._stop_requested.is_set():
            try:
                events = self.panel.read_events(self.read_timeout_ms)
            except PanelError as e:
                logger.error(f"Panel read failed, stopping: {e.technical_message}")
                raise

            for event in events:
                if not self.machine.handle_event(event):
                    logger.info("Control loop finished by exit key")
                    return
        logger.info("Control loop stopped")

    def _cleanup(self) -> None:
        logger.info("Cleaning up buttons...")
        try:
            self.panel.clear_all_button_images()
            self.panel.flush()
        except PanelError as e:
            logger.warning(f"Could not clear panel: {e.technical_message}")
