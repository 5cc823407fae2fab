"""Launches an external player for recorded takes without blocking the caller."""

import logging
import subprocess
import threading
from pathlib import Path

from recdeck.exceptions import PlaybackError

logger = logging.getLogger(__name__)

DEFAULT_PLAYER = "pw-play"
DEFAULT_SINK = "MyMixer"


class PlaybackLauncher:
    """
    Plays audio files through an external player process.

    Each `play()` call runs the player on its own daemon thread, so a long
    take or a broken player never stalls panel event handling. Overlapping
    playbacks are independent and unordered.
    """

    def __init__(self, player: str = DEFAULT_PLAYER, sink: str | None = DEFAULT_SINK):
        """
        Initialize the launcher.

        Args:
            player: Player executable (looked up on PATH)
            sink: Output sink passed as ``--target <sink>``; None plays to the default output
        """
        self.player = player
        self.sink = sink

    def build_command(self, path: Path) -> list[str]:
        """Build the player command line for a file."""
        cmd = [self.player]
        if self.sink:
            cmd += ["--target", self.sink]
        cmd.append(str(path))
        return cmd

    def run(self, path: Path) -> None:
        """
        Play a file and wait for the player to exit.

        Raises:
            PlaybackError: If the player can't be spawned or exits non-zero
        """
        cmd = self.build_command(path)
        if self.sink:
            logger.info(f"Playing {path} with '{self.player}' on sink {self.sink}")
        else:
            logger.info(f"Playing {path} with '{self.player}' on the default output")

        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as e:
            raise PlaybackError(self.player, str(path), f"could not start: {e}") from e

        if result.returncode != 0:
            reason = f"exit status {result.returncode}"
            stderr = (result.stderr or "").strip()
            if stderr:
                reason += f": {stderr}"
            raise PlaybackError(self.player, str(path), reason)

        logger.info(f"Playback of {path} finished")

    def play(self, path: Path) -> threading.Thread:
        """
        Start playback in the background and return immediately.

        Failures are only logged.

        Returns:
            The worker thread (callers normally ignore it)
        """
        thread = threading.Thread(
            target=self._run_logged,
            args=(path,),
            name=f"playback-{Path(path).name}",
            daemon=True,
        )
        thread.start()
        return thread

    def _run_logged(self, path: Path) -> None:
        try:
            self.run(path)
        except PlaybackError as e:
            logger.error(e.technical_message)
