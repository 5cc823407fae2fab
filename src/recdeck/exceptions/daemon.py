"""Recording daemon exceptions.

This module defines exceptions for talking to the recording daemon:
- DaemonError: Base class for daemon errors
- DaemonConnectionError: Daemon unreachable or the exchange broke off
- DaemonBusyError: STATUS did not report the daemon as listening
"""

from .base import RecdeckError


class DaemonError(RecdeckError):
    """Communication with the recording daemon failed."""

    def __init__(self, user_message: str, command: str | None = None, **kwargs):
        """
        Initialize daemon error.

        Args:
            user_message: User-friendly error message
            command: The command being sent when the error occurred
        """
        super().__init__(user_message, **kwargs)
        self.command = command


class DaemonConnectionError(DaemonError):
    """Daemon socket could not be reached, or no response line was received."""

    def __init__(self, socket_path: str, command: str, reason: str):
        """
        Initialize daemon connection error.

        Args:
            socket_path: Path of the daemon's Unix socket
            command: The command that was being sent
            reason: Low-level description of what went wrong
        """
        super().__init__(
            user_message=f"Could not talk to the recording daemon ({reason})",
            technical_message=f"Daemon exchange on {socket_path} failed for {command!r}: {reason}",
            command=command,
            recoverable=True,
            recovery_hint=(
                f"Make sure the recording daemon is running and listening on {socket_path}. "
                "Run 'recdeck daemon status' to check."
            ),
        )
        self.socket_path = socket_path
        self.reason = reason


class DaemonBusyError(DaemonError):
    """Daemon answered STATUS with something other than the idle marker."""

    def __init__(self, status: str):
        """
        Initialize daemon busy error.

        Args:
            status: The raw STATUS response line
        """
        super().__init__(
            user_message="The recording daemon is not ready to record",
            technical_message=f"Daemon STATUS was not listening: {status!r}",
            command="STATUS",
            recoverable=True,
            recovery_hint="Wait for the current recording to finish and press the key again.",
        )
        self.status = status
