"""Recording and playback exceptions.

This module defines exceptions for recording files and playback:
- RecordingError: Base class for recording errors
- RecordingAlreadyActiveError: A second key tried to become the live key
- RecordingDeleteError: A recording file could not be deleted
- PlaybackError: The external player failed
"""

from .base import RecdeckError


class RecordingError(RecdeckError):
    """A recording operation failed."""

    def __init__(self, user_message: str, key: int | None = None, **kwargs):
        """
        Initialize recording error.

        Args:
            user_message: User-friendly error message
            key: The panel key involved (if applicable)
        """
        super().__init__(user_message, **kwargs)
        self.key = key


class RecordingAlreadyActiveError(RecordingError):
    """Another key is already recording."""

    def __init__(self, key: int, active_key: int):
        super().__init__(
            user_message=f"Key {active_key} is already recording",
            technical_message=f"Refused to start key {key}: key {active_key} is the active recording",
            key=key,
            recoverable=True,
            recovery_hint=f"Release key {active_key} to stop its recording first.",
        )
        self.active_key = active_key


class RecordingDeleteError(RecordingError):
    """Recording file could not be removed from disk."""

    def __init__(self, key: int, path: str, original_error: str):
        """
        Initialize delete error.

        Args:
            key: The panel key whose recording was being deleted
            path: The recording file path
            original_error: The OS error message
        """
        super().__init__(
            user_message=f"Could not delete recording {path}",
            technical_message=f"Deleting {path} for key {key} failed: {original_error}",
            key=key,
            recoverable=True,
            recovery_hint="Check the file permissions, then hold the key again.",
        )
        self.path = path
        self.original_error = original_error


class PlaybackError(RecdeckError):
    """External player could not be started or exited with an error."""

    def __init__(self, player: str, path: str, reason: str):
        """
        Initialize playback error.

        Args:
            player: Player executable name
            path: File that was being played
            reason: Spawn error or exit status description
        """
        super().__init__(
            user_message=f"Playback of {path} failed",
            technical_message=f"Playback command '{player}' failed for {path}: {reason}",
            recoverable=True,
            recovery_hint=f"Check that '{player}' is installed and on your PATH.",
        )
        self.player = player
        self.path = path
        self.reason = reason
