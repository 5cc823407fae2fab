"""Per-key state machine that turns panel presses into recording actions."""

import logging
import time
from collections.abc import Callable
from pathlib import Path

from recdeck.daemon import DaemonClient
from recdeck.devices import ButtonDownEvent, ButtonUpEvent, PanelDriver, PanelEvent
from recdeck.exceptions import (
    DaemonBusyError,
    DaemonConnectionError,
    RecordingAlreadyActiveError,
    RecordingDeleteError,
)
from recdeck.icons import IconStore
from recdeck.models import Gesture, IconState, KeyBindingTable, KeyState
from recdeck.playback import PlaybackLauncher

from .session import HoldTracker, RecordingSession

logger = logging.getLogger(__name__)

DEFAULT_HOLD_THRESHOLD = 2.0


class ButtonStateMachine:
    """
    Decides what each press and release of a bound key does.

    Key states are derived on demand, never stored:

    - EMPTY: no file on disk, key is not recording
    - RECORDING: key owns the recording session
    - HAS_FILE: file on disk, key is not recording
    - HELD: HAS_FILE and the key is currently down (hold timer running)

    The file on disk is the source of truth for EMPTY vs HAS_FILE and is
    re-checked on every decision. The recording key always counts as
    RECORDING, even if the daemon has already created its file.

    Every transition ends with an icon write and a flush, so the panel
    never shows a stale icon while the next event is handled.

    Threading:
        handle_event() must be called from a single thread (the control
        loop). Daemon calls block that thread; playback does not.
    """

    def __init__(
        self,
        bindings: KeyBindingTable,
        daemon: DaemonClient,
        launcher: PlaybackLauncher,
        icons: IconStore,
        panel: PanelDriver,
        hold_threshold: float = DEFAULT_HOLD_THRESHOLD,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the state machine.

        Args:
            bindings: Key to recording file table
            daemon: Recording daemon client
            launcher: Playback launcher for tap-to-play
            icons: Icon images per state
            panel: Panel to render icons on
            hold_threshold: Seconds a take must be held to delete it
            clock: Monotonic time source in seconds
        """
        self.bindings = bindings
        self.daemon = daemon
        self.launcher = launcher
        self.icons = icons
        self.panel = panel
        self.hold_threshold = hold_threshold
        self._clock = clock

        self._session = RecordingSession()
        self._holds = HoldTracker()

    # ================================================================
    # STATE QUERIES
    # ================================================================

    @property
    def active_key(self) -> int | None:
        """Key that is currently recording, if any."""
        return self._session.active_key

    @property
    def holding(self) -> list[int]:
        """Keys whose hold timer is running."""
        return self._holds.keys()

    def key_state(self, key: int) -> KeyState | None:
        """
        Derive the state of a key.

        Returns:
            The key's state, or None if the key is unbound
        """
        path = self.bindings.path_for(key)
        if path is None:
            return None
        if self._session.is_active(key):
            return KeyState.RECORDING
        if not path.exists():
            return KeyState.EMPTY
        if self._holds.is_holding(key):
            return KeyState.HELD
        return KeyState.HAS_FILE

    # ================================================================
    # RENDERING
    # ================================================================

    def render(self, key: int, state: IconState) -> None:
        """Show the icon for `state` on `key` and flush it to the panel."""
        self.panel.set_button_image(key, self.icons.image_for(state))
        self.panel.flush()

    def render_initial(self) -> None:
        """Show HAS_FILE or EMPTY on every bound key according to the disk."""
        for binding in self.bindings:
            state = IconState.HAS_FILE if binding.path.exists() else IconState.EMPTY
            self.panel.set_button_image(binding.key, self.icons.image_for(state))
        self.panel.flush()
        logger.info(f"Rendered initial icons for {len(self.bindings)} bound keys")

    # ================================================================
    # EVENT DISPATCH
    # ================================================================

    def handle_event(self, event: PanelEvent) -> bool:
        """
        Apply one panel event.

        Returns:
            False when the exit gesture was made and the loop must stop
        """
        if isinstance(event, ButtonDownEvent):
            self.on_press(event.key)
        elif isinstance(event, ButtonUpEvent):
            return self.on_release(event.key)
        else:
            logger.debug(f"Ignoring panel event {event!r}")
        return True

    def on_press(self, key: int) -> None:
        """Handle a key going down."""
        state = self.key_state(key)

        if state is None:
            logger.debug(f"Key {key} down: unbound, ignored")
        elif state is KeyState.RECORDING:
            logger.debug(f"Key {key} down: already recording, ignored")
        elif state in (KeyState.HAS_FILE, KeyState.HELD):
            logger.info(f"Key {key} down (file exists). Holding for delete...")
            self._holds.start(key, self._clock())
            self.render(key, IconState.RECORDING)
        else:
            self._try_start_recording(key)

    def on_release(self, key: int) -> bool:
        """
        Handle a key coming up.

        Returns:
            False if this was the exit key
        """
        if key == self.panel.key_count() - 1:
            logger.info("Exit key released. Shutting down.")
            return False

        if self._session.is_active(key):
            self._try_stop_recording(key)
            return True

        elapsed = self._holds.finish(key, self._clock())
        if elapsed is None:
            logger.debug(f"Key {key} up: nothing to do")
            return True

        path = self.bindings.path_for(key)
        if path is None:
            return True

        gesture = Gesture.classify(elapsed, self.hold_threshold)
        logger.info(f"Key {key} up after {elapsed:.2f}s: {gesture.value}")
        if gesture is Gesture.HOLD:
            self._delete_recording(key, path)
        else:
            self.launcher.play(path)
            self.render(key, IconState.HAS_FILE)
        return True

    # ================================================================
    # TRANSITIONS
    # ================================================================

    def _try_start_recording(self, key: int) -> None:
        path = self.bindings.path_for(key)
        active = self._session.active_key
        if active is not None:
            logger.warning(RecordingAlreadyActiveError(key, active).technical_message)
            return

        logger.info(f"Key {key} down (no file). Checking daemon status...")
        try:
            status = self.daemon.status()
        except DaemonConnectionError as e:
            logger.error(f"Failed to get STATUS: {e.technical_message}")
            return

        if not status.is_listening:
            logger.warning(DaemonBusyError(status.raw).technical_message)
            return

        try:
            self.daemon.start_recording(path)
        except DaemonConnectionError as e:
            logger.error(f"Failed to send START: {e.technical_message}")
            return

        self._session.begin(key)
        self.render(key, IconState.RECORDING)
        logger.info(f"Key {key}: recording started into {path}")

    def _try_stop_recording(self, key: int) -> None:
        logger.info(f"Key {key} up while recording. Sending STOP...")
        try:
            self.daemon.stop_recording()
        except DaemonConnectionError as e:
            # Session stays active so the next release retries STOP
            logger.error(f"Failed to send STOP: {e.technical_message}")
            self.panel.flush()
            return

        self._session.end(key)
        self.render(key, IconState.HAS_FILE)
        logger.info(f"Key {key}: recording stopped, file saved")

    def _delete_recording(self, key: int, path: Path) -> None:
        try:
            path.unlink()
        except OSError as e:
            error = RecordingDeleteError(key, str(path), str(e))
            logger.error(error.technical_message)
            self.render(key, IconState.HAS_FILE if path.exists() else IconState.EMPTY)
            return

        logger.info(f"Key {key}: deleted {path}")
        self.render(key, IconState.EMPTY)
