"""Enumerations for recdeck."""

from enum import Enum


class IconState(str, Enum):
    """Visual states a bound key can display."""

    EMPTY = "empty"  # No recording on disk, ready to record
    RECORDING = "recording"  # Live recording, or hold indicator while a take is held
    HAS_FILE = "has_file"  # Take on disk, tap to play


class KeyState(str, Enum):
    """Logical state of a bound key, derived on demand."""

    EMPTY = "empty"
    RECORDING = "recording"
    HAS_FILE = "has_file"
    HELD = "held"


class Gesture(str, Enum):
    """Press/release gesture on a key that already has a take."""

    TAP = "tap"
    HOLD = "hold"

    @classmethod
    def classify(cls, elapsed: float, threshold: float) -> "Gesture":
        """
        Classify a press/release pair by how long the key was held.

        The threshold is inclusive: a hold of exactly `threshold` seconds
        is a HOLD.

        Args:
            elapsed: Seconds between press-down and release
            threshold: Minimum hold duration in seconds

        Returns:
            Gesture.HOLD or Gesture.TAP
        """
        return cls.HOLD if elapsed >= threshold else cls.TAP
