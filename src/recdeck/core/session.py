"""Recording session and hold tracking state owned by the button state machine."""

import logging
from threading import Lock

from recdeck.exceptions import RecordingAlreadyActiveError

logger = logging.getLogger(__name__)


class RecordingSession:
    """
    The single "which key is recording" slot.

    At most one key can be active. `begin` refuses a second key and `end`
    only clears the slot for the key that owns it, so the invariant can't
    be broken by a stray call. The lock makes both checks atomic even if
    the session is touched from more than one thread.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._active_key: int | None = None

    @property
    def active_key(self) -> int | None:
        """Key that is currently recording, if any."""
        with self._lock:
            return self._active_key

    def is_active(self, key: int) -> bool:
        """Check if `key` is the recording key."""
        with self._lock:
            return self._active_key == key

    def begin(self, key: int) -> None:
        """
        Mark `key` as recording.

        Raises:
            RecordingAlreadyActiveError: If a different key is recording
        """
        with self._lock:
            if self._active_key is not None and self._active_key != key:
                raise RecordingAlreadyActiveError(key, self._active_key)
            self._active_key = key

    def end(self, key: int) -> bool:
        """
        Clear the slot if `key` owns it.

        Returns:
            True if the slot was cleared
        """
        with self._lock:
            if self._active_key != key:
                return False
            self._active_key = None
            return True


class HoldTracker:
    """Press-start instants of keys being held, by key index."""

    def __init__(self) -> None:
        self._started: dict[int, float] = {}

    def start(self, key: int, now: float) -> None:
        """Record that `key` went down at `now`."""
        self._started[key] = now

    def finish(self, key: int, now: float) -> float | None:
        """
        Stop tracking `key`.

        Returns:
            Seconds the key was held, or None if it wasn't being tracked
        """
        started = self._started.pop(key, None)
        if started is None:
            return None
        return now - started

    def is_holding(self, key: int) -> bool:
        return key in self._started

    def keys(self) -> list[int]:
        return list(self._started)

    def clear(self) -> None:
        self._started.clear()
