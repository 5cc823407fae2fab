"""High-level application facade wiring config to the control loop."""

import logging

from recdeck.daemon import DaemonClient
from recdeck.devices import PanelDriver
from recdeck.icons import IconStore
from recdeck.models import AppConfig
from recdeck.playback import PlaybackLauncher

from .control_loop import ControlLoop
from .state_machine import ButtonStateMachine

logger = logging.getLogger(__name__)


class RecdeckApplication:
    """
    Builds every component from an AppConfig and runs the control loop.

    Separates concerns:
    - DaemonClient: talks to the recording daemon
    - PlaybackLauncher: plays takes back
    - ButtonStateMachine: decides what each key does
    - ControlLoop: owns the panel read loop and cleanup
    """

    def __init__(self, config: AppConfig, panel: PanelDriver, icons: IconStore | None = None):
        """
        Initialize the application.

        Args:
            config: Application configuration
            panel: An opened panel driver
            icons: Icon images (loaded from config.icons if None)
        """
        self.config = config
        self.panel = panel

        self.daemon = DaemonClient(config.socket_path, timeout=config.daemon_timeout)
        self.launcher = PlaybackLauncher(player=config.player, sink=config.playback_sink)
        self.icons = icons or IconStore.load(config.icons)
        self.machine = ButtonStateMachine(
            bindings=config.binding_table(),
            daemon=self.daemon,
            launcher=self.launcher,
            icons=self.icons,
            panel=panel,
            hold_threshold=config.hold_threshold,
        )
        self.loop = ControlLoop(
            panel,
            self.machine,
            read_timeout_ms=config.read_timeout_ms,
            brightness=config.brightness,
        )
        logger.info(
            f"Application ready: {len(config.bindings)} bound keys, "
            f"daemon at {config.socket_path}, hold threshold {config.hold_threshold}s"
        )

    def run(self) -> None:
        """Run the control loop until it finishes."""
        self.loop.run()

    def stop(self) -> None:
        """Request the control loop to stop."""
        self.loop.stop()
