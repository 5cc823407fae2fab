"""Client for the recording daemon's line protocol.

The daemon listens on a Unix domain socket and handles one command per
connection::

    client -> daemon:  STATUS\\n            (then half-close)
    daemon -> client:  <one line of text>\\n

Commands are ``STATUS``, ``START <absolute path>`` and ``STOP``. Only the
STATUS response is inspected; for START and STOP a received line means
success.
"""

import logging
import socket
from dataclasses import dataclass
from pathlib import Path

from recdeck.exceptions import DaemonConnectionError

logger = logging.getLogger(__name__)

DEFAULT_SOCKET_PATH = Path("/tmp/rust-audio-monitor.sock")
LISTENING_MARKER = "Listening"


@dataclass(frozen=True)
class DaemonStatus:
    """Parsed STATUS response."""

    raw: str

    @property
    def is_listening(self) -> bool:
        """True when the daemon is idle and will accept START."""
        return LISTENING_MARKER in self.raw


class DaemonClient:
    """
    Sends single-line commands to the recording daemon.

    A fresh connection is opened for every command; nothing is kept
    between calls. No retries happen here: callers decide whether and
    when to retry (the button state machine retries STOP on the next
    release of the recording key).
    """

    def __init__(self, socket_path: Path | str = DEFAULT_SOCKET_PATH, timeout: float | None = 5.0):
        """
        Initialize the client.

        Args:
            socket_path: Path of the daemon's Unix socket
            timeout: Seconds allowed for connect, write and read each
                     (None blocks until the daemon answers)
        """
        self.socket_path = Path(socket_path)
        self.timeout = timeout

    def send(self, command: str) -> str:
        """
        Send one command and return the daemon's response line.

        Args:
            command: Command text without the trailing newline

        Returns:
            The response line with surrounding whitespace stripped

        Raises:
            DaemonConnectionError: If the socket can't be reached, the write
                fails, the exchange times out, or the daemon closes the
                connection without answering
        """
        logger.debug(f"Sending daemon command: {command}")

        with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
            sock.settimeout(self.timeout)

            try:
                sock.connect(str(self.socket_path))
            except OSError as e:
                raise self._error(command, f"connect failed: {e}") from e

            try:
                # Paths are sent as their filesystem bytes, even when not valid UTF-8
                sock.sendall(f"{command}\n".encode("utf-8", errors="surrogateescape"))
                sock.shutdown(socket.SHUT_WR)
            except OSError as e:
                raise self._error(command, f"write failed: {e}") from e

            try:
                with sock.makefile("r", encoding="utf-8", errors="replace") as reader:
                    line = reader.readline()
            except OSError as e:
                raise self._error(command, f"read failed: {e}") from e

        if not line:
            raise self._error(command, "connection closed without a response")

        response = line.strip()
        logger.debug(f"Daemon response to {command!r}: {response!r}")
        return response

    def status(self) -> DaemonStatus:
        """Query the daemon state."""
        return DaemonStatus(self.send("STATUS"))

    def start_recording(self, path: Path) -> str:
        """Ask the daemon to start recording into `path`."""
        return self.send(f"START {Path(path).absolute()}")

    def stop_recording(self) -> str:
        """Ask the daemon to stop the current recording."""
        return self.send("STOP")

    def _error(self, command: str, reason: str) -> DaemonConnectionError:
        error = DaemonConnectionError(str(self.socket_path), command, reason)
        logger.debug(error.technical_message)
        return error
